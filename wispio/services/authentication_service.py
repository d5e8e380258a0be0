"""
Post-login checks for the signed-in user.

Decides which onboarding step a freshly signed-in user must complete before
reaching the application. Presentation code maps each step to a page.
"""

import logging
from enum import Enum

from wispio.services.access import DataAccess
from wispio.utils.constants import UserAccessibleClaim

logger = logging.getLogger(__name__)


class PostLoginStep(str, Enum):
    ACCOUNT_CHECKUP = "account_checkup"
    SELECT_PLAN = "select_plan"
    READY = "ready"


class AuthenticationService:
    def __init__(self, access: DataAccess):
        self._access = access

    async def _flag(self, claim: UserAccessibleClaim) -> bool:
        return bool(await self._access.get_claim(claim))

    async def is_email_verified(self) -> bool:
        return await self._flag(UserAccessibleClaim.EMAIL_VERIFIED)

    async def has_current_plan(self) -> bool:
        return await self._flag(UserAccessibleClaim.CURRENT_PLAN)

    async def is_billing_active(self) -> bool:
        return await self._flag(UserAccessibleClaim.BILLING_ACTIVE)

    async def resolve_post_login_step(self) -> PostLoginStep:
        """
        Return the first onboarding step the user still has to complete.

        Email verification comes first; the plan and billing checks only run
        once the email is verified.
        """
        if not await self.is_email_verified():
            logger.info("Post-login check: email not verified")
            return PostLoginStep.ACCOUNT_CHECKUP

        has_plan = await self.has_current_plan()
        billing_active = await self.is_billing_active()
        if not has_plan or not billing_active:
            logger.info(
                f"Post-login check: plan selection required "
                f"(has_plan={has_plan}, billing_active={billing_active})"
            )
            return PostLoginStep.SELECT_PLAN

        return PostLoginStep.READY
