"""Top-level reset and auto-login flows."""

from typing import Callable, Optional
from models.credentials import Credentials
from models.result import OnboardingState, OperationResult
from services.launcher import ExecutableNotFoundError
from logger import get_logger

logger = get_logger()

BrowserLogin = Callable[[Credentials], OperationResult]


class ResetOrchestrator:
    """Runs the reset steps in strict order.

    Args:
        services: Services container with every component configured.
    """

    def __init__(self, services):
        self.services = services
        self.config = services.config

    def full_reset(self) -> OperationResult:
        """Close the editor, purge caches and user data, regenerate identifiers.

        Steps contain their own failures; only an unexpected exception
        aborts the sequence.

        Returns:
            OperationResult with the new identifiers on success.
        """
        name = self.config.app_name
        timing = self.config.timing

        logger.info("=" * 60)
        logger.info(f"{name} full reset")
        logger.info("=" * 60)

        try:
            logger.info(f"\n[Step 1/4] Closing {name}")
            if self.services.processes.is_running():
                logger.warning(f"⚠️  {name} is running")
                self.services.processes.terminate()
                logger.info(f"✓ {name} shutdown finished")
                self.services.sleep(timing.post_close_wait)
            else:
                logger.info(f"✓ {name} is not running")

            logger.info("\n[Step 2/4] Deleting caches and data")
            self.services.state.purge_caches()
            logger.info("✓ Caches and data deleted")

            logger.info("\n[Step 3/4] Cleaning user data")
            self.services.state.purge_user_data()
            logger.info("✓ User data cleaned")

            logger.info("\n[Step 4/4] Writing preset configuration and new machine ids")
            ids = self.services.identifiers.regenerate()
            logger.info("✓ Preset configuration written, machine ids reset")

            logger.info("\n" + "=" * 60)
            logger.info(f"✅ {name} reset complete!")
            logger.info("=" * 60)

            return OperationResult.ok(
                f"{name} reset complete", identifiers=ids.to_dict()
            )
        except Exception as e:
            logger.exception(f"\n❌ Reset failed: {e}")
            return OperationResult.failed(str(e))

    def auto_login(
        self,
        credentials: Credentials,
        browser_login: Optional[BrowserLogin] = None,
    ) -> OperationResult:
        """Reset, relaunch, click through onboarding, then hand off to the browser.

        Args:
            credentials: Account to log in with.
            browser_login: Optional collaborator that completes the login in
                the browser. Without it the result asks the caller to finish
                the login.

        Returns:
            OperationResult; needs_browser_login is set when no collaborator
            was given.
        """
        name = self.config.app_name
        timing = self.config.timing

        logger.info(f"\n🔐 Starting {name} auto-login...")
        logger.info(f"📧 Email: {credentials.email}")

        logger.info(f"\n========== Step 1: full {name} reset ==========")
        reset_result = self.full_reset()
        if not reset_result.success:
            logger.error(f"\n❌ Auto-login failed: reset failed: {reset_result.error}")
            return OperationResult.failed(f"Reset failed: {reset_result.error}")

        try:
            self.services.sleep(timing.post_reset_wait)

            logger.info(f"\n========== Step 2: launch {name} ==========")
            try:
                self.services.launcher.launch()
            except ExecutableNotFoundError as e:
                logger.error(f"\n❌ Auto-login failed: {e}")
                return OperationResult.failed(str(e))
            self.services.sleep(timing.post_launch_wait)

            logger.info("\n========== Step 3: complete onboarding ==========")
            onboarding_result = self.services.onboarding.complete()
            onboarding_state = onboarding_result.details.get(
                "onboarding", OnboardingState.FAILED
            )
            if not onboarding_result.success:
                logger.warning("⚠️  Onboarding may not have finished, continuing")

            logger.info("\n========== Step 4: browser login ==========")
            if browser_login is not None:
                return browser_login(credentials)
        except Exception as e:
            logger.exception(f"\n❌ Auto-login failed: {e}")
            return OperationResult.failed(str(e))

        logger.info("💡 The login page should be open in the browser")
        logger.info("💡 Complete the login there, manually or with a browser automation tool")

        return OperationResult.ok(
            "Auto-login flow finished, complete the login in the browser",
            needs_browser_login=True,
            onboarding=onboarding_state,
        )
