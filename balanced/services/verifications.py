"""Bank account verifications.

Creating a verification triggers two micro-deposits of random amounts under
$1 into the target account; they usually show up within two business days as
"Balanced Verification" on the owner's statement. The owner confirms
ownership by submitting both amounts. Three attempts are allowed, after which
a new verification must be created. Accounts that only receive credits do not
need one.
"""
from __future__ import annotations

from ..models import ConfirmationAmounts, Verification, VerificationEnvelope
from .base import ResourceService, resource_path

__all__ = ["VerificationService"]


class VerificationService(ResourceService):
    path = "/verifications"
    envelope = VerificationEnvelope

    def create(self, account_id: str) -> Verification:
        return self._create(resource_path("/bank_accounts", account_id, "verifications"))

    def fetch(self, verification_id: str) -> Verification:
        return self._fetch(verification_id)

    def confirm(self, verification_id: str, amount_1: int, amount_2: int) -> Verification:
        body = ConfirmationAmounts(amount_1=amount_1, amount_2=amount_2)
        return self.http.put(self._item_path(verification_id), body, into=self.envelope).first()
