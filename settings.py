import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (hosted platforms provide real env vars instead)
env_path = Path(__file__).resolve().parent / '.env'

DEFAULT_SHEET_NAME = 'フォーム入力'
DEFAULT_TIMEZONE = 'Asia/Tokyo'


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for the intake service."""
    sheet_id: str = ''
    sheet_name: str = DEFAULT_SHEET_NAME
    client_email: str = ''
    private_key: str = ''
    service_account_file: str = ''
    gas_exec_url: str = ''
    recalc_token: str = ''
    recalc_action: str = 'recalc'
    skip_sheet_write: bool = False
    cors_origin: str = '*'
    local_timezone: str = DEFAULT_TIMEZONE
    log_level: str = 'INFO'

    @classmethod
    def from_env(cls, environ=None, load_file=True):
        """Builds settings from the process environment (and .env if present)."""
        if load_file:
            load_dotenv(dotenv_path=env_path)
        env = os.environ if environ is None else environ

        def get(name, default=''):
            return (env.get(name) or default).strip()

        return cls(
            sheet_id=get('SHEET_ID'),
            sheet_name=get('SHEET_NAME', DEFAULT_SHEET_NAME),
            client_email=get('GOOGLE_CLIENT_EMAIL'),
            # Keys pasted into dashboards arrive with escaped newlines
            private_key=get('GOOGLE_PRIVATE_KEY').replace('\\n', '\n'),
            service_account_file=get('SERVICE_ACCOUNT_FILE'),
            gas_exec_url=get('GAS_EXEC_URL'),
            recalc_token=get('RECALC_TOKEN'),
            recalc_action=get('RECALC_ACTION', 'recalc'),
            skip_sheet_write=get('SKIP_SHEET_WRITE') == '1',
            cors_origin=get('CORS_ORIGIN', '*'),
            local_timezone=get('LOCAL_TIMEZONE', DEFAULT_TIMEZONE),
            log_level=get('LOG_LEVEL', 'INFO').upper(),
        )

    @property
    def has_inline_credentials(self):
        return bool(self.client_email and self.private_key)
