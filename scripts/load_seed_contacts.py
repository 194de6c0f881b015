#!/usr/bin/env python3
"""Load sample contacts into Neo4j.

Reads the YAML seed (first argument, else ROLODEX_SEED_FILE, else data/contacts.yaml)
and adds the contacts when the Contact graph is empty. Run from repo root with .env
(NEO4J_URI, NEO4J_USER, NEO4J_PASSWORD). Idempotent: a non-empty graph is left alone.
"""
import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(REPO_ROOT / "src"))

from dotenv import load_dotenv  # noqa: E402
from neo4j import GraphDatabase  # noqa: E402

from rolodex.infrastructure import (  # noqa: E402
    Neo4jContactRepository,
    default_seed_path,
    ensure_contact_constraint,
    load_seed,
    seed_repository,
)

load_dotenv(REPO_ROOT / ".env")


def _seed_path(argv: list[str]) -> Path:
    if len(argv) > 1:
        return Path(argv[1]).resolve()
    env_path = os.environ.get("ROLODEX_SEED_FILE", "").strip()
    return Path(env_path).resolve() if env_path else default_seed_path()


def main(argv: list[str]) -> int:
    path = _seed_path(argv)
    try:
        records = load_seed(path)
    except (OSError, ValueError) as e:
        print(f"Cannot read seed file {path}: {e}", file=sys.stderr)
        return 1
    uri = os.environ.get("NEO4J_URI", "bolt://localhost:7687").strip()
    user = os.environ.get("NEO4J_USER", "neo4j").strip()
    password = os.environ.get("NEO4J_PASSWORD", "password").strip()
    driver = GraphDatabase.driver(uri, auth=(user, password))
    try:
        ensure_contact_constraint(driver)
        added = seed_repository(Neo4jContactRepository(driver), records)
        if not added:
            print("Contact graph is not empty; nothing loaded.")
            return 0
        print(f"Loaded {added} contact(s) from {path}")
        return 0
    finally:
        driver.close()


if __name__ == "__main__":
    sys.exit(main(sys.argv))
