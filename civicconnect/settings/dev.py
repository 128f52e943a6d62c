# Local application imports
from civicconnect.settings.common import CommonSettings


class DevSettings(CommonSettings):
    DEBUG_MODE: bool = True
    DATABASE_ECHO: bool = True
