import os
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from errors import CONFIG, ReindentError
from schemas_common import ReindentOptions

DEFAULT_TAB_SIZE = 4
DEFAULT_SMART_TAB_SIZE = 1


class Settings(BaseSettings):
    # Mode
    SMART: bool = False
    TAB_SIZE: Optional[int] = Field(default=None, description="4, or 1 in smart mode")

    # Matching
    RECURSIVE: bool = False
    HOME_DIRECTORY: str = "."

    # IO / output
    ENCODING: str = "utf-8"
    VERBOSE: bool = False

    model_config = SettingsConfigDict(
        env_prefix="TABBY_",
        env_file=None if os.getenv("DISABLE_DOTENV") == "1" else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def load_settings() -> Settings:
    """
    Читает окружение/.env. Некорректное значение (например, TABBY_TAB_SIZE=abc)
    -> ReindentError(stage="config"), а не ValidationError при импорте.
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ReindentError(f"invalid environment: {_format_errors(e)}", stage=CONFIG) from None


def _format_errors(e: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
    )


def _pick(value, fallback):
    return fallback if value is None else value


def resolve_options(
    base: Optional[Settings] = None,
    *,
    smart: Optional[bool] = None,
    tab_size: Optional[int] = None,
    recursive: Optional[bool] = None,
    verbose: Optional[bool] = None,
    home_directory: Optional[str] = None,
) -> ReindentOptions:
    """
    CLI > окружение/.env > значения по умолчанию.
    Ошибка валидации (например, tab_size=0) -> ReindentError(stage="config").
    """
    if base is None:
        base = load_settings()
    smart = _pick(smart, base.SMART)
    default_tab = DEFAULT_SMART_TAB_SIZE if smart else DEFAULT_TAB_SIZE
    try:
        return ReindentOptions(
            smart=smart,
            tab_size=_pick(tab_size, _pick(base.TAB_SIZE, default_tab)),
            recursive=_pick(recursive, base.RECURSIVE),
            verbose=_pick(verbose, base.VERBOSE),
            home_directory=_pick(home_directory, base.HOME_DIRECTORY),
            encoding=base.ENCODING,
        )
    except ValidationError as e:
        raise ReindentError(f"invalid options: {_format_errors(e)}", stage=CONFIG) from None
