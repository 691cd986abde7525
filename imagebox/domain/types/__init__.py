from imagebox.domain.types.image_info import ImageInfo
from imagebox.domain.types.image_type import ImageType
