"""
Deep link handling for verse URLs.

Format: ``{scheme}://verse/{book}/{chapter}/{verse}?translation={id}``,
e.g. ``biblev1://verse/John/3/16?translation=engKJV``.
"""

from urllib.parse import parse_qs, quote, unquote, urlencode, urlsplit

from versegraph.config import DeepLinkConfig
from versegraph.models.reference import VerseReference
from versegraph.services.navigation import Navigator
from versegraph.utils.logger import get_logger

logger = get_logger(__name__)


def _positive_int(value: str) -> int | None:
    if not (value.isascii() and value.isdigit()):
        return None
    number = int(value)
    return number if number >= 1 else None


class DeepLinkHandler:
    """Parses verse deep links and forwards them to the navigator."""

    def __init__(self, navigator: Navigator, config: DeepLinkConfig | None = None):
        self.navigator = navigator
        self.config = config or DeepLinkConfig()

    def parse(self, url: str) -> VerseReference | None:
        """
        Parse a verse deep link.

        Returns:
            VerseReference, or None if scheme, host or path shape don't match
            or chapter/verse are not positive integers
        """
        try:
            parts = urlsplit(url.strip())
        except ValueError:
            return None

        if parts.scheme.lower() != self.config.scheme.lower():
            return None
        if parts.netloc.lower() != self.config.host.lower():
            return None

        # Empty segments count, so "verse//John/3/16" has four components
        components = parts.path.removeprefix("/").split("/")
        if len(components) != 3:
            return None

        book = unquote(components[0]).strip()
        chapter = _positive_int(components[1])
        verse = _positive_int(components[2])
        if not book or chapter is None or verse is None:
            return None

        translation = parse_qs(parts.query).get("translation", [""])[0]

        return VerseReference(
            translation=translation or self.config.default_translation,
            book=book,
            chapter=chapter,
            verse=verse,
        )

    def handle(self, url: str) -> bool:
        """
        Navigate to the verse a deep link points at.

        Returns:
            True if the link was valid and navigation was requested; malformed
            links return False and leave the navigator untouched
        """
        reference = self.parse(url)
        if reference is None:
            logger.debug(f"Ignoring malformed deep link: {url}")
            return False
        self.navigator.navigate_to_verse(reference)
        return True

    def build(self, reference: VerseReference) -> str:
        """Build the deep link for a verse reference."""
        path = "/".join([quote(reference.book), str(reference.chapter), str(reference.verse)])
        query = urlencode({"translation": reference.translation})
        return f"{self.config.scheme}://{self.config.host}/{path}?{query}"
