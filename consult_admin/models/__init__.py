from consult_admin.models.log_model import Log
from consult_admin.models.category_model import Category, Subcategory
from consult_admin.models.service_model import Service
from consult_admin.models.admin_model import Admin, Otp

__all__ = ["Log", "Category", "Subcategory", "Service", "Admin", "Otp"]
