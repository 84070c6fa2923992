"""存储层：输入缓冲读取与分类文件写出。"""

from .text_files import read_text_buffer, write_categories, write_ranked_list

__all__ = ["read_text_buffer", "write_categories", "write_ranked_list"]
