"""Where generated sites end up."""
import json
import re
import unicodedata
from datetime import datetime
from pathlib import Path
from typing import Protocol

from brandsite.app.logger import logger
from brandsite.app.models import GenerationArtifact


def slugify(name: str) -> str:
    """URL-safe identifier: lowercase ascii words joined by hyphens."""
    ascii_name = unicodedata.normalize('NFKD', name or '').encode('ascii', 'ignore').decode('ascii')
    slug = re.sub(r'[^a-z0-9]+', '-', ascii_name.lower()).strip('-')
    return slug or 'site'


class SiteStore(Protocol):
    def save(self, slug: str, artifact: GenerationArtifact) -> bool:
        """Persist the artifact under slug; report success."""
        ...


class LocalSiteStore:
    """Writes <slug>.html plus a JSON record of the run to a directory."""

    def __init__(self, directory: str = "generated_sites"):
        self.directory = Path(directory)

    def save(self, slug: str, artifact: GenerationArtifact) -> bool:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            html_path = self.directory / f"{slug}.html"
            html_path.write_text(artifact.html, encoding='utf-8')

            record = artifact.model_dump(exclude={'html', 'saved'})
            record['saved_at'] = datetime.now().isoformat(timespec='seconds')
            record['html_file'] = html_path.name
            (self.directory / f"{slug}.json").write_text(json.dumps(record, indent=2), encoding='utf-8')
        except OSError as e:
            logger.error(f"✗ Could not save site '{slug}': {e}", exc_info=True)
            return False

        logger.info(f"✓ Site saved to: {html_path.absolute()}")
        return True
