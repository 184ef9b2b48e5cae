"""FoodHub Backend — Upload Schemas"""

from foodhub.schemas.common import CamelModel


class UploadResponse(CamelModel):
    """
    Returned by POST /api/upload with HTTP 201.

    file_url is relative to the server root (e.g. /uploads/2024/01/15/<uuid>.jpg)
    and can be stored directly in Food.image or User.profile_pic.
    """
    message: str = "Image uploaded successfully"
    file_url: str
    filename: str
