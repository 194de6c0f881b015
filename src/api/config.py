"""Runtime settings read from the environment (.env is loaded by api.main)."""

import os
from dataclasses import dataclass
from pathlib import Path

BACKEND_MEMORY = "memory"
BACKEND_NEO4J = "neo4j"
BACKENDS = (BACKEND_MEMORY, BACKEND_NEO4J)


@dataclass(frozen=True)
class Settings:
    backend: str = BACKEND_MEMORY
    seed_file: Path | None = None
    neo4j_uri: str = "bolt://localhost:7687"
    neo4j_user: str = "neo4j"
    neo4j_password: str = "password"


def load_log_level() -> str:
    """Root logging level from LOG_LEVEL (default INFO)."""
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def load_settings() -> Settings:
    """Build Settings from ROLODEX_* and NEO4J_*. Unknown backend raises ValueError."""
    backend = os.environ.get("ROLODEX_BACKEND", BACKEND_MEMORY).strip().lower() or BACKEND_MEMORY
    if backend not in BACKENDS:
        raise ValueError(
            f"ROLODEX_BACKEND must be one of {', '.join(BACKENDS)}, got {backend!r}"
        )
    seed = os.environ.get("ROLODEX_SEED_FILE", "").strip()
    return Settings(
        backend=backend,
        seed_file=Path(seed).resolve() if seed else None,
        neo4j_uri=os.environ.get("NEO4J_URI", "bolt://localhost:7687").strip(),
        neo4j_user=os.environ.get("NEO4J_USER", "neo4j").strip(),
        neo4j_password=os.environ.get("NEO4J_PASSWORD", "password").strip(),
    )
