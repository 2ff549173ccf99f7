"""枚举定义：约束存储类型的可选值。"""

from enum import Enum


class StorageTypeEnum(str, Enum):
    """存储类型：决定存储是否需要填写路径、能否读写文件。"""

    FOLDER = "folder"
    EXTERNAL = "external"
    EXTERNAL_READONLY = "external-readonly"
    VIDEO = "video"
