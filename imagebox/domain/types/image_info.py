from typing import Optional

from pydantic import Field

from imagebox.domain.types.base import BaseInfo
from imagebox.domain.types.image_type import ImageType


class ImageInfo(BaseInfo):
    file_name: str = Field(description="Source or target path of the image")
    type: ImageType = Field(default=ImageType.PNG, description="Image type")
    file_extension: str
    mime_type: str
    width: Optional[int] = None
    height: Optional[int] = None
    mode: Optional[str] = Field(default=None, description='Pillow mode, e.g. "RGBA"')
    loaded: bool = False
