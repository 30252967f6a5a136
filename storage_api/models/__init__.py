from storage_api.models.base import Base  # noqa: F401

from storage_api.models.user import User  # noqa: F401
from storage_api.models.api_key import ApiKey  # noqa: F401
from storage_api.models.location import Location  # noqa: F401
from storage_api.models.kitchen import Kitchen  # noqa: F401
from storage_api.models.storage_listing import StorageListing  # noqa: F401
from storage_api.models.platform_setting import PlatformSetting  # noqa: F401
from storage_api.models.audit_log import AuditLog  # noqa: F401
