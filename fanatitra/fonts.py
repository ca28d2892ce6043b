"""
Font lookup for the receipt.

System fonts are preferred. When none of the known families is installed,
Liberation Sans is downloaded once into ``~/.fonts`` and reused afterwards.
"""

import logging
import os
import sys
import time
from pathlib import Path
from typing import NamedTuple

import requests

from fanatitra.errors import FontResolutionError, HomeDirectoryError

logger = logging.getLogger(__name__)


class FontPaths(NamedTuple):
    regular: str
    bold: str


# ─── SYSTEM FONTS ───

SYSTEM_FONTS = {
    'win32': [
        FontPaths(r'C:\Windows\Fonts\Arial.ttf', r'C:\Windows\Fonts\Arialbd.ttf'),
        FontPaths(r'C:\Windows\Fonts\Calibri.ttf', r'C:\Windows\Fonts\Calibrib.ttf'),
        FontPaths(r'C:\Windows\Fonts\Segoeui.ttf', r'C:\Windows\Fonts\Segoeuib.ttf'),
    ],
    'linux': [
        FontPaths('/usr/share/fonts/TTF/DejaVuSans.ttf',
                  '/usr/share/fonts/TTF/DejaVuSans-Bold.ttf'),
        FontPaths('/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf',
                  '/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf'),
        FontPaths('/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf',
                  '/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf'),
        FontPaths('/usr/share/fonts/noto/NotoSans-Regular.ttf',
                  '/usr/share/fonts/noto/NotoSans-Bold.ttf'),
        FontPaths('/usr/share/fonts/truetype/noto/NotoSans-Regular.ttf',
                  '/usr/share/fonts/truetype/noto/NotoSans-Bold.ttf'),
    ],
    'darwin': [
        FontPaths('/Library/Fonts/Arial.ttf', '/Library/Fonts/Arial Bold.ttf'),
        # Helvetica ships as a collection holding both weights
        FontPaths('/System/Library/Fonts/Helvetica.ttc',
                  '/System/Library/Fonts/Helvetica.ttc'),
    ],
}

# ─── FALLBACK FONTS ───

FALLBACK_DIR = '.fonts'
FALLBACK_BASE_URL = (
    'https://github.com/liberationfonts/liberation-fonts/raw/main/'
    'liberation-fonts-ttf-2.1.5/'
)
FALLBACK_FILES = FontPaths('LiberationSans-Regular.ttf', 'LiberationSans-Bold.ttf')

DOWNLOAD_TIMEOUT = 30
DOWNLOAD_ATTEMPTS = 3
RETRY_DELAY = 1.0


def _platform_key(platform):
    if platform.startswith('linux'):
        return 'linux'
    return platform


def _installed(*paths):
    return all(os.path.exists(path) for path in paths)


def find_font(platform=None, home=None):
    """Return the first installed regular/bold pair, else the fallback"""
    platform = _platform_key(platform or sys.platform)
    for candidate in SYSTEM_FONTS.get(platform, []):
        if _installed(candidate.regular, candidate.bold):
            logger.info("Using system fonts %s", candidate.regular)
            return candidate

    logger.info("No system font found for %s, using fallback", platform)
    return setup_fallback_fonts(home=home)


def _home_directory(home=None):
    if home is not None:
        return Path(home)
    try:
        return Path.home()
    except RuntimeError as exc:
        raise HomeDirectoryError(f"could not get home directory: {exc}") from exc


def setup_fallback_fonts(home=None, session=None):
    """Download Liberation Sans into ~/.fonts unless it is already there"""
    fonts_dir = _home_directory(home) / FALLBACK_DIR
    try:
        fonts_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FontResolutionError(f"could not create fonts directory: {exc}") from exc

    session = session or requests.Session()
    paths = FontPaths(*(str(fonts_dir / name) for name in FALLBACK_FILES))
    for filename, path in zip(FALLBACK_FILES, paths):
        if _installed(path):
            continue
        try:
            download_font(FALLBACK_BASE_URL + filename, Path(path), session=session)
        except (requests.RequestException, OSError) as exc:
            raise FontResolutionError(
                f"could not setup fallback font {filename}: {exc}"
            ) from exc
    return paths


def download_font(url, dest, session=None, attempts=DOWNLOAD_ATTEMPTS):
    """
    Fetch a font file with a bounded number of attempts.

    The file is written next to its destination and renamed into place, so an
    interrupted download never leaves a truncated font behind.
    """
    session = session or requests.Session()
    partial = dest.with_name(dest.name + '.part')

    for attempt in range(1, attempts + 1):
        logger.info("Downloading %s (attempt %d/%d)", url, attempt, attempts)
        try:
            response = session.get(url, timeout=DOWNLOAD_TIMEOUT)
            response.raise_for_status()
        except requests.RequestException as exc:
            if attempt == attempts:
                raise
            logger.warning("Font download failed: %s", exc)
            time.sleep(RETRY_DELAY)
            continue

        partial.write_bytes(response.content)
        os.replace(partial, dest)
        return dest
