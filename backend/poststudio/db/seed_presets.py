"""
Seed script to create the industry tone presets.

Presets are stored as custom tones with is_preset=True. Seeding is
idempotent: presets whose name already exists are skipped.

Run with:
    cd backend
    python -m poststudio.db.seed_presets
"""

import logging
import sys
from pathlib import Path

# Add backend to path
backend_root = Path(__file__).resolve().parent.parent.parent
sys.path.insert(0, str(backend_root))

from poststudio.db.presets import INDUSTRY_PRESETS
from poststudio.db.repositories import CustomToneRepository
from poststudio.db.supabase import get_supabase
from poststudio.errors import StorageError

logger = logging.getLogger(__name__)


def seed_presets() -> int:
    """Seed the industry presets. Returns the number of presets created."""
    repository = CustomToneRepository(get_supabase().client)
    return repository.seed_presets(INDUSTRY_PRESETS)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    try:
        created = seed_presets()
    except StorageError as e:
        logger.error(f"Error seeding presets: {e.message}")
        sys.exit(1)
    logger.info(f"Seeding complete! Created: {created} presets")
