# campus_wellness/db/init_db.py

from campus_wellness.db.session import Base, SessionLocal, engine
import campus_wellness.db.models  # noqa: F401  registers every table on Base.metadata
from campus_wellness.api.templates.services import seed_templates


def init():
    print("Connecting to database...")

    print("Creating tables (if not exist)...")
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        count = seed_templates(db)
        if count is None:
            print("Response templates already present, skipping seed.")
        else:
            print(f"Seeded {count} response templates.")
    finally:
        db.close()

    print("✅ Done.")


if __name__ == "__main__":
    init()
