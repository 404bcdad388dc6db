"""
Tests for the in-memory record store: create/lookup, natural keys, status updates, invariants.
Run from project root: python -m pytest tests/test_record_store.py -v
"""
import unittest
from decimal import Decimal

from pydantic import ValidationError

from errors import DuplicateReferenceError, NotFoundError
from schemas import UserCreate
from tests.factories import branch_body, customer_body, loan_body, make_store


class TestRecordStore(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.store = await make_store()

    async def asyncTearDown(self):
        await self.store.close()

    async def test_create_customer_assigns_id(self):
        customer = await self.store.create_customer(customer_body())
        self.assertTrue(customer.id.startswith("cust-"))
        fetched = await self.store.get_customer(customer.id)
        self.assertIsNotNone(fetched)
        self.assertEqual(fetched.name, "Kiran Kempegowda")
        self.assertEqual(fetched.annual_income, 360000)

    async def test_unknown_ids_return_none(self):
        self.assertIsNone(await self.store.get_customer("cust-missing"))
        self.assertIsNone(await self.store.get_loan("loan-missing"))
        self.assertIsNone(await self.store.get_branch("branch-missing"))
        self.assertIsNone(await self.store.get_user("user-missing"))
        self.assertIsNone(await self.store.get_loan_by_rupeek_id("9999999"))

    async def test_ids_are_unique(self):
        a = await self.store.create_customer(customer_body())
        b = await self.store.create_customer(customer_body())
        self.assertNotEqual(a.id, b.id)

    async def test_create_loan_and_lookup_by_reference(self):
        customer = await self.store.create_customer(customer_body())
        loan = await self.store.create_loan(loan_body(customer.id))
        self.assertTrue(loan.id.startswith("loan-"))
        self.assertIsNotNone(loan.created_at)

        by_ref = await self.store.get_loan_by_rupeek_id("7001910")
        self.assertEqual(by_ref.id, loan.id)
        self.assertEqual(by_ref.customer_id, customer.id)
        self.assertEqual(by_ref.interest_rate, Decimal("22"))
        self.assertEqual(by_ref.total_gross_weight, Decimal("165.56"))
        self.assertEqual(by_ref.jewelry_items, ["Necklace", "Bangle"])

        by_id = await self.store.get_loan(loan.id)
        self.assertEqual(by_id.rupeek_loan_id, "7001910")

    async def test_loan_requires_existing_customer(self):
        with self.assertRaises(NotFoundError):
            await self.store.create_loan(loan_body("cust-missing"))
        self.assertEqual(await self.store.list_loans(), [])

    async def test_duplicate_reference_refused(self):
        customer = await self.store.create_customer(customer_body())
        await self.store.create_loan(loan_body(customer.id))
        with self.assertRaises(DuplicateReferenceError):
            await self.store.create_loan(loan_body(customer.id, status="pending", rejection_reasons=None))
        self.assertEqual(len(await self.store.list_loans()), 1)

    async def test_list_loans_in_creation_order(self):
        customer = await self.store.create_customer(customer_body())
        for ref in ("7001911", "7001912", "7001913"):
            await self.store.create_loan(loan_body(customer.id, ref, status="pending", rejection_reasons=None))
        loans = await self.store.list_loans()
        self.assertEqual([l.rupeek_loan_id for l in loans], ["7001911", "7001912", "7001913"])

    async def test_update_status_merges_patch_and_overwrites_status(self):
        customer = await self.store.create_customer(customer_body())
        loan = await self.store.create_loan(loan_body(customer.id))
        updated = await self.store.update_loan_status(
            loan.id, "manually_approved", {"approved_by": "A1", "status": "ignored"}
        )
        self.assertEqual(updated.status, "manually_approved")
        self.assertEqual(updated.approved_by, "A1")
        # Untouched fields survive
        self.assertEqual(updated.rejection_reasons, ["Jewelry valuation below minimum threshold"])

        reloaded = await self.store.get_loan(loan.id)
        self.assertEqual(reloaded.status, "manually_approved")
        self.assertEqual(reloaded.approved_by, "A1")

    async def test_update_status_unknown_id_returns_none(self):
        self.assertIsNone(await self.store.update_loan_status("loan-missing", "approved"))

    async def test_update_status_rejects_unknown_fields(self):
        customer = await self.store.create_customer(customer_body())
        loan = await self.store.create_loan(loan_body(customer.id))
        with self.assertRaises(ValueError):
            await self.store.update_loan_status(loan.id, "approved", {"id": "loan-other"})
        with self.assertRaises(ValueError):
            await self.store.update_loan_status(loan.id, "approved", {"not_a_column": 1})
        self.assertEqual((await self.store.get_loan(loan.id)).status, "rejected")

    async def test_first_branch_is_earliest_created(self):
        self.assertIsNone(await self.store.get_first_branch())
        first = await self.store.create_branch(branch_body("Jayanagar"))
        await self.store.create_branch(branch_body("Koramangala", sol_id=None))
        branch = await self.store.get_first_branch()
        self.assertEqual(branch.id, first.id)
        self.assertEqual(branch.sol_id, "NA")
        self.assertEqual((await self.store.get_branch(first.id)).name, "Jayanagar")

    async def test_users_by_username(self):
        user = await self.store.create_user(UserCreate(username="operator", password="secret"))
        self.assertTrue(user.id.startswith("user-"))
        self.assertEqual((await self.store.get_user(user.id)).username, "operator")
        self.assertEqual((await self.store.get_user_by_username("operator")).id, user.id)
        self.assertIsNone(await self.store.get_user_by_username("nobody"))
        with self.assertRaises(DuplicateReferenceError):
            await self.store.create_user(UserCreate(username="operator", password="other"))


class TestLoanCreateInvariants(unittest.TestCase):
    def test_rejection_reasons_only_on_rejected(self):
        with self.assertRaises(ValidationError):
            loan_body("cust-1", status="pending")

    def test_manual_approval_requires_metadata(self):
        with self.assertRaises(ValidationError):
            loan_body("cust-1", status="manually_approved", rejection_reasons=None)

    def test_approval_metadata_only_on_manually_approved(self):
        with self.assertRaises(ValidationError):
            loan_body("cust-1", approved_by="A1")

    def test_free_text_status_tolerated(self):
        body = loan_body("cust-1", status="on_hold", rejection_reasons=None)
        self.assertEqual(body.status, "on_hold")

    def test_camel_case_input_accepted(self):
        body = loan_body("cust-1")
        data = body.model_dump(by_alias=True)
        self.assertIn("rupeekLoanId", data)
        self.assertEqual(type(body).model_validate(data).rupeek_loan_id, "7001910")


if __name__ == "__main__":
    unittest.main()
