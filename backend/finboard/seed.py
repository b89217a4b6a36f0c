import logging

from finboard.db.session import SessionLocal
from finboard.services.categories import CategoryService
from finboard.services.result import ErrorKind
from finboard.store.base import RecordStore, StoreError
from finboard.store.sql import SqlRecordStore

logger = logging.getLogger(__name__)

# built-in categories; is_custom_c=False keeps them from being deleted
DEFAULT_CATEGORIES = [
    ("Food & Dining", "#ef4444", "Utensils"),
    ("Transportation", "#f59e0b", "Car"),
    ("Shopping", "#8b5cf6", "ShoppingBag"),
    ("Entertainment", "#ec4899", "Film"),
    ("Bills & Utilities", "#3b82f6", "Receipt"),
    ("Healthcare", "#10b981", "Heart"),
    ("Salary", "#22c55e", "Briefcase"),
    ("Other", "#6b7280", "Tag"),
]


def seed_categories(store: RecordStore) -> int:
    svc = CategoryService(store)
    records = []
    for name, color, icon in DEFAULT_CATEGORIES:
        found = svc.name_result(name)
        if found.ok:
            continue
        if found.error.kind is not ErrorKind.NOT_FOUND:
            raise StoreError(found.error.message)
        records.append({"Name": name, "name_c": name, "color_c": color, "icon_c": icon, "is_custom_c": False})
    if not records:
        return 0
    response = store.create_record(svc.collection, {"records": records})
    if not response.get("success"):
        raise StoreError(response.get("message") or "seeding categories failed")
    results = response.get("results") or []
    failed = [r for r in results if not r.get("success")]
    if failed:
        logger.error("failed to seed %d categories: %s", len(failed), failed)
    seeded = len(results) - len(failed)
    logger.info("seeded %d categories", seeded)
    return seeded


def main():
    s = SessionLocal()
    try:
        seed_categories(SqlRecordStore(s))
    finally:
        s.close()

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
