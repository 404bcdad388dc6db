"""
Seed demo customers, branches and loans (the loans shown on the Sanctions page).
Runs at app startup when SEED_SAMPLE_DATA is on; also runnable against a file database:
    DATABASE_URL=sqlite+aiosqlite:///./support_desk.db python -m scripts.seed_sample_data
"""
import asyncio
import logging

from config import settings
from schemas import BranchCreate, CustomerCreate, LoanCreate
from services.record_store import RecordStore

logger = logging.getLogger(__name__)

BRANCHES_DATA = [
    {
        "sol_id": "NA",
        "name": "Jayanagar",
        "address": "4th Block, 28th Cross, 10th Main Road, Jayanagar, Bengaluru, Karnataka 560011 Bangalore Jayanagar 560011",
    },
    {
        "sol_id": None,
        "name": "Koramangala",
        "address": "80 Feet Road, 4th Block, Koramangala, Bengaluru, Karnataka 560034",
    },
]


def _customer(name: str, **overrides) -> dict:
    data = {
        "name": name,
        "father_husband_name": name.split()[-1],
        "dob": "1 Jan 1985",
        "gender": "Male",
        "pan_number": "ABCDE1234F",
        "phone": "9000000000",
        "address": "Bangalore, Karnataka",
        "pin_code": "560001",
        "marital_status": "Married",
        "annual_income": 300000,
        "profession": "Salaried",
        "bank_name": "SBI",
        "religion": "Hindu",
        "ifsc_code": "SBIN0000001",
        "qualification": "Graduate",
        "account_number": "000000000000",
    }
    data.update(overrides)
    return data


def _loan(rupeek_loan_id: str, loan_date: str, total_amount: int, status: str, **overrides) -> dict:
    data = {
        "rupeek_loan_id": rupeek_loan_id,
        "loan_date": loan_date,
        "scheme_name": "SIB- RUPEEK (Agri-6 Months )",
        "total_amount": total_amount,
        "interest_rate": "22",
        "per_gram_rate": "4654.4",
        "penal_interest_rate": "3",
        "rupeek_gold_rate": "5818",
        "tenure_months": 6,
        "disbursal_amount": total_amount,
        "ltv": "80",
        "processing_fee": 0,
        "disbursal_charges": 0,
        "total_gross_weight": "120.00",
        "total_net_weight": "110.00",
        "total_adjustment": "10.00",
        "jewelry_items": ["Necklace", "Bangle"],
        "status": status,
    }
    data.update(overrides)
    return data


# (customer, loan) pairs; loans reference their customer once it is created
LOANS_DATA = [
    (
        _customer(
            "Kiran Kempegowda",
            father_husband_name="Kempegowda",
            dob="2 Mar 1985",
            pan_number="AWTPK2176N",
            phone="9008551515",
            address="# 49 2ND MAIN\nRR RESIDENCY OPP UPKAR LAYOUT\nWATER TANK,ULLAL,VISWANEEDAM\nBANGALORE North Bangalore\nKARNATAKA",
            pin_code="560091",
            annual_income=360000,
            profession="Self",
            bank_name="RBL BANK",
            ifsc_code="UTIB000RAZP",
            account_number="222300962215223235",
        ),
        _loan(
            "7001910",
            "18 Apr 2024",
            708654,
            "rejected",
            total_gross_weight="165.56",
            total_net_weight="152.86",
            total_adjustment="12.70",
            jewelry_items=["Necklace", "Bangle", "Bangle", "Bangle", "Necklace", "Finger Ring", "Finger Ring", "Ear rings"],
            rejection_reasons=[
                "Insufficient income verification documents",
                "Jewelry valuation below minimum threshold",
                "Credit score does not meet policy requirements",
            ],
        ),
    ),
    (
        _customer("Rajesh Kumar", phone="9845012345", pan_number="BQRPK4521L"),
        _loan("7001911", "20 Apr 2024", 500000, "pending"),
    ),
    (
        _customer("Priya Sharma", gender="Female", phone="9886023456", pan_number="CTSPS7812M"),
        _loan("7001912", "21 Apr 2024", 750000, "pending", jewelry_items=["Necklace", "Ear rings", "Bangle"]),
    ),
    (
        _customer("Amit Patel", phone="9900134567", pan_number="DKLPP3390K", profession="Self"),
        _loan("7001913", "19 Apr 2024", 600000, "approved"),
    ),
    (
        _customer("Sunita Reddy", gender="Female", phone="9731045678", pan_number="EMNPR6654J"),
        _loan(
            "7001914",
            "17 Apr 2024",
            450000,
            "rejected",
            jewelry_items=["Finger Ring", "Chain"],
            rejection_reasons=["Credit score does not meet policy requirements"],
        ),
    ),
]


async def seed_sample_data(store: RecordStore) -> None:
    """Insert demo records; loans already present (by reference) are skipped with their customer."""
    if await store.get_first_branch() is None:
        for data in BRANCHES_DATA:
            await store.create_branch(BranchCreate(**data))
    for customer_data, loan_data in LOANS_DATA:
        if await store.get_loan_by_rupeek_id(loan_data["rupeek_loan_id"]) is not None:
            logger.info("Loan %s already exists, skipping", loan_data["rupeek_loan_id"])
            continue
        customer = await store.create_customer(CustomerCreate(**customer_data))
        await store.create_loan(LoanCreate(customer_id=customer.id, **loan_data))
        logger.info("Seeded loan %s for %s", loan_data["rupeek_loan_id"], customer.name)


async def main() -> None:
    store = RecordStore(settings.database_url, echo=settings.debug)
    await store.init()
    try:
        await seed_sample_data(store)
    finally:
        await store.close()
    logger.info("Seed complete.")


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level)
    asyncio.run(main())
