import logging
from urllib.parse import urlparse

import requests

from errors import ConfigurationError, DownstreamError

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30


class RecalcTrigger:
    """Asks the Apps Script web app to recompute the sheet's derived values."""

    def __init__(self, settings, session=None):
        self.settings = settings
        self.session = session or requests.Session()

    @property
    def enabled(self):
        return bool(self.settings.gas_exec_url)

    def _validate(self):
        url = self.settings.gas_exec_url
        parsed = urlparse(url)
        if parsed.scheme not in ('http', 'https') or not parsed.netloc:
            raise ConfigurationError(f"GAS_EXEC_URL is not a valid URL: {url!r}")
        if not self.settings.recalc_token:
            raise ConfigurationError("RECALC_TOKEN is not set.")

    def trigger(self):
        """Calls the webhook. Returns False when no webhook is configured."""
        if not self.enabled:
            logger.debug("GAS_EXEC_URL not set; skipping recalculation")
            return False
        self._validate()

        params = {'token': self.settings.recalc_token, 'action': self.settings.recalc_action}
        try:
            response = self.session.post(self.settings.gas_exec_url, params=params, timeout=REQUEST_TIMEOUT)
        except requests.RequestException as e:
            raise DownstreamError(f"GAS recalc request failed: {e}") from e

        if not response.ok:
            raise DownstreamError(f"GAS recalc failed: {response.status_code} {response.text}")
        logger.info("GAS recalc completed (%s)", response.status_code)
        return True
