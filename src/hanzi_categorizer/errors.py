"""分类运行的错误类型：任何一种都会中止整次运行。"""

from __future__ import annotations


class CategorizerError(RuntimeError):
    """分类某个阶段失败的基类，消息中写明失败的阶段。"""

    def __init__(self, reason: str):
        super().__init__(reason)


class InputOpenError(CategorizerError):
    """输入文件无法打开或解码。"""


class TokenizationError(CategorizerError):
    """词性标注器拒绝了输入缓冲。"""


class TaggerUnavailableError(CategorizerError):
    """请求的标注后端无法初始化。"""


class OutputCreateError(CategorizerError):
    """某个类别的输出文件无法创建，category 记录出错的类别。"""

    def __init__(self, reason: str, category: str | None = None):
        super().__init__(reason)
        self.category = category
