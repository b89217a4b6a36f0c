from fastapi import APIRouter, Depends

from finboard.api.deps import categories, unwrap
from finboard.schemas.category import Category, CategoryCreate, CategoryUpdate
from finboard.services.categories import CategoryService

router = APIRouter(prefix="/categories", tags=["categories"])


def _require_category(svc: CategoryService, category_id: int) -> Category:
    return unwrap(svc.get_result(category_id), "category_not_found")


@router.get("", response_model=list[Category])
def list_categories(svc: CategoryService = Depends(categories)):
    return unwrap(svc.fetch_result(), "category_not_found")


@router.get("/by-name/{name}", response_model=Category)
def get_category_by_name(name: str, svc: CategoryService = Depends(categories)):
    return unwrap(svc.name_result(name), "category_not_found")


@router.get("/{category_id}", response_model=Category)
def get_category(category_id: int, svc: CategoryService = Depends(categories)):
    return _require_category(svc, category_id)


@router.post("", response_model=Category)
def create_category(body: CategoryCreate, svc: CategoryService = Depends(categories)):
    return unwrap(svc.create_result(body), "category_not_found")


@router.patch("/{category_id}", response_model=Category)
def update_category(category_id: int, body: CategoryUpdate, svc: CategoryService = Depends(categories)):
    _require_category(svc, category_id)
    return unwrap(svc.update_result(category_id, body), "category_not_found")


@router.delete("/{category_id}")
def delete_category(category_id: int, svc: CategoryService = Depends(categories)):
    unwrap(svc.delete_result(category_id), "category_not_found", "category_not_deletable")
    return {"ok": True}
