from storefront.repositories.store import TableStore
from storefront.repositories.user import get_user_by_email, get_user_by_id
from storefront.repositories.catalog import (
    get_category_by_slug,
    get_product_by_slug,
    list_categories,
    list_products,
)
from storefront.repositories.enquiries import list_enquiries

__all__ = [
    "TableStore",
    # User repositories
    "get_user_by_id",
    "get_user_by_email",
    # Catalog repositories
    "get_category_by_slug",
    "get_product_by_slug",
    "list_categories",
    "list_products",
    # Enquiry repositories
    "list_enquiries",
]
