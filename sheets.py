import logging
import threading

from google.auth.exceptions import GoogleAuthError, TransportError
from google.oauth2.service_account import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from errors import (
    ConfigurationError,
    DownstreamError,
    MissingHeaderError,
    SheetsAuthError,
    SubmissionError,
)
from field_aliases import normalize_keys

logger = logging.getLogger(__name__)

SCOPES = ['https://www.googleapis.com/auth/spreadsheets']
TOKEN_URI = 'https://oauth2.googleapis.com/token'


def build_sheets_service(settings):
    """Authenticates with the service account and returns a Sheets API service object."""
    try:
        if settings.has_inline_credentials:
            creds = Credentials.from_service_account_info({
                'type': 'service_account',
                'client_email': settings.client_email,
                'private_key': settings.private_key,
                'token_uri': TOKEN_URI,
            }, scopes=SCOPES)
        elif settings.service_account_file:
            creds = Credentials.from_service_account_file(
                settings.service_account_file, scopes=SCOPES)
        else:
            raise ConfigurationError(
                "GOOGLE_CLIENT_EMAIL / GOOGLE_PRIVATE_KEY (or SERVICE_ACCOUNT_FILE) are not set.")
    except FileNotFoundError:
        raise ConfigurationError(
            f"The service account key file was not found at '{settings.service_account_file}'.")
    except ValueError as e:
        # google-auth raises ValueError for keys it cannot parse
        raise SheetsAuthError(f"Could not load service account credentials: {e}") from e

    return build('sheets', 'v4', credentials=creds, cache_discovery=False)


def build_row(headers, normalized):
    """Lines values up under the sheet headers; unknown headers get an empty cell."""
    return [normalized.get(header, '') for header in headers]


class SheetCache:
    """
    Holds the authenticated Sheets client and header rows between requests.

    Entries are replaced wholesale, so concurrent writers simply overwrite
    each other; invalidate() drops everything so the next request starts fresh.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._service = None
        self._headers = {}

    def get_service(self):
        with self._lock:
            return self._service

    def set_service(self, service):
        with self._lock:
            self._service = service

    def get_headers(self, spreadsheet_id, sheet_name):
        with self._lock:
            return self._headers.get((spreadsheet_id, sheet_name))

    def set_headers(self, spreadsheet_id, sheet_name, headers):
        with self._lock:
            self._headers[(spreadsheet_id, sheet_name)] = list(headers)

    def invalidate(self):
        with self._lock:
            self._service = None
            self._headers.clear()


class SheetAppender:
    """Appends one normalized submission per call to the configured sheet tab."""

    def __init__(self, settings, cache=None, service_factory=build_sheets_service):
        self.settings = settings
        self.cache = cache if cache is not None else SheetCache()
        self._service_factory = service_factory

    def _service(self):
        service = self.cache.get_service()
        if service is None:
            service = self._service_factory(self.settings)
            self.cache.set_service(service)
        return service

    def fetch_headers(self, service):
        """Reads row 1 of the tab; the cached copy is used when present."""
        sheet_id, sheet_name = self.settings.sheet_id, self.settings.sheet_name
        headers = self.cache.get_headers(sheet_id, sheet_name)
        if headers is not None:
            return headers

        result = service.spreadsheets().values().get(
            spreadsheetId=sheet_id,
            range=f'{sheet_name}!1:1'
        ).execute()
        rows = result.get('values') or [[]]
        headers = [str(h) for h in rows[0]]
        if not headers:
            raise MissingHeaderError(f"Sheet '{sheet_name}' has no header row.")

        self.cache.set_headers(sheet_id, sheet_name, headers)
        return headers

    def append(self, fields):
        """
        Appends a single row built from the submitted fields.

        Returns the 'updates' block of the API response. Any failure clears
        the cached client and headers before it is raised.
        """
        if not self.settings.sheet_id or not self.settings.sheet_name:
            raise ConfigurationError("SHEET_ID / SHEET_NAME are not set.")

        try:
            service = self._service()
            headers = self.fetch_headers(service)
            row = build_row(headers, normalize_keys(fields))
            result = service.spreadsheets().values().append(
                spreadsheetId=self.settings.sheet_id,
                range=self.settings.sheet_name,
                valueInputOption='USER_ENTERED',
                insertDataOption='INSERT_ROWS',
                body={'values': [row]}
            ).execute()
        except SubmissionError:
            self.cache.invalidate()
            raise
        except Exception as e:
            self.cache.invalidate()
            translated = _translate_error(e)
            if translated is e:
                raise
            raise translated from e

        updates = result.get('updates', {})
        logger.info("Appended row to '%s' (%s)", self.settings.sheet_name, updates.get('updatedRange'))
        return updates


def _translate_error(error):
    if isinstance(error, HttpError):
        status = getattr(error.resp, 'status', None)
        if status in (401, 403):
            return SheetsAuthError(f"Google Sheets rejected the credentials ({status}): {error}")
        return DownstreamError(f"Google Sheets API error ({status}): {error}")
    if isinstance(error, TransportError):
        return DownstreamError(f"Could not reach Google Sheets: {error}")
    if isinstance(error, GoogleAuthError):
        return SheetsAuthError(f"Google authentication failed: {error}")
    if isinstance(error, OSError):
        return DownstreamError(f"Could not reach Google Sheets: {error}")
    return error
