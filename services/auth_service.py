import hmac
import logging

logger = logging.getLogger(__name__)

# Single built-in user; there is no account store behind this check.
_USERNAME = "nagesh"
_PASSWORD = "nagesh"


class AuthService:
    def __init__(self, username: str = _USERNAME, password: str = _PASSWORD):
        self._username = username
        self._password = password
        self._logged_in = False

    @property
    def is_logged_in(self) -> bool:
        return self._logged_in

    def check_credentials(self, username: str, password: str) -> bool:
        """Exact, case-sensitive match against the configured pair."""
        user_ok = hmac.compare_digest(username.encode("utf-8"), self._username.encode("utf-8"))
        pass_ok = hmac.compare_digest(password.encode("utf-8"), self._password.encode("utf-8"))
        return user_ok and pass_ok

    def login(self, username: str, password: str) -> bool:
        if self.check_credentials(username, password):
            self._logged_in = True
            logger.info("User %r logged in.", username)
            return True
        logger.warning("Rejected login attempt for user %r.", username)
        return False

    def logout(self):
        self._logged_in = False
        logger.info("User logged out.")
