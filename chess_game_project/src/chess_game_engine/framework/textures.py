"""
纹理加载接口

纹理的查找与加载由宿主框架负责，规则层只关心纹理文件名。
"""

from typing import Dict, List, Protocol


class TextureLoader(Protocol):
    """宿主框架的纹理加载器接口"""

    def load(self, name: str) -> object:
        ...


class NullTextureLoader:
    """
    无渲染环境下使用的纹理加载器

    不读取任何文件，只记录请求过的纹理名称。
    """

    def __init__(self):
        self.requested: List[str] = []
        self._cache: Dict[str, str] = {}

    def load(self, name: str) -> object:
        self.requested.append(name)
        return self._cache.setdefault(name, name)
