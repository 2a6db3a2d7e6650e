"""Path translation module.

Converts a Linux path into the form the host shell understands by calling
the external translation utility (wslpath -w by default).
"""

import logging
import subprocess

from exebridge.config import get_path_translator
from exebridge.constants import PATH_TRANSLATOR_FLAG
from exebridge.errors import TranslationError

logger = logging.getLogger(__name__)


def translate(path, translator: str | None = None) -> str:
    """Translate a local path with the external utility.

    Args:
        path: Local filesystem path.
        translator: Utility to run. Defaults to the configured one.

    Returns:
        The translated path.

    Raises:
        TranslationError: The utility is missing or failed (recoverable),
            or it reported success without printing a path (not recoverable).
    """
    if translator is None:
        translator = get_path_translator()

    try:
        result = subprocess.run(
            [translator, PATH_TRANSLATOR_FLAG, str(path)],
            capture_output=True,
            text=True,
        )
    except OSError as e:
        raise TranslationError(path, f"cannot run {translator}: {e}") from e

    if result.returncode != 0:
        raise TranslationError(
            path,
            f"{translator} exited with code {result.returncode}: {result.stderr.strip()}",
        )

    translated = result.stdout.strip()
    if not translated:
        raise TranslationError(
            path, f"{translator} returned no path", recoverable=False
        )

    logger.debug("Translated %s -> %s", path, translated)
    return translated
