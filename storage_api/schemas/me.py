from storage_api.schemas.common import CamelModel


class MeOut(CamelModel):
    api_key_id: str
    user_id: int
    role: str
