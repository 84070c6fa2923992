"""命令行入口：选择输入文件与输出目录后运行一次分类。"""

from __future__ import annotations

import argparse
import logging
from typing import List, Sequence

from .config import CategorizerConfig
from .core.categorizer import Categorizer
from .core.tagging import BACKENDS
from .errors import CategorizerError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hanzi-categorizer",
        description="把中文文本按字、词类、成语、俚语与短语分类，并按频次写出到各自的文件",
    )
    parser.add_argument("input_file", nargs="?", help="输入文本文件（缺省时交互输入）")
    parser.add_argument("output_dir", nargs="?", help="输出目录（缺省时交互输入）")
    parser.add_argument("--idioms", help="成语表文件，每行一条")
    parser.add_argument("--slang", help="俚语表文件，每行一条")
    parser.add_argument("--backend", choices=BACKENDS, help="词性标注后端，缺省自动探测")
    parser.add_argument("--encoding", default="utf-8", help="输入与输出文件编码")
    parser.add_argument(
        "--no-register-phrases",
        action="store_true",
        help="不把成语/俚语表登记进分词词典",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="输出调试日志")
    return parser


def _prompt(value: str | None, message: str) -> str:
    if value:
        return value
    answer = input(message).strip()
    if not answer:
        raise SystemExit("未选择路径，已取消。")
    return answer


def _build_config(args: argparse.Namespace) -> CategorizerConfig:
    config = CategorizerConfig(
        tagger_backend=args.backend,
        register_phrase_lists=not args.no_register_phrases,
        input_encoding=args.encoding,
        output_encoding=args.encoding,
    )
    try:
        return config.with_phrase_lists(
            idioms_path=args.idioms,
            slang_path=args.slang,
            encoding=args.encoding,
        )
    except (OSError, UnicodeDecodeError) as exc:
        raise SystemExit(f"无法读取词表：{exc}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    input_file = _prompt(args.input_file, "请输入要分类的文本文件路径：")
    output_dir = _prompt(args.output_dir, "请输入输出目录：")
    config = _build_config(args)
    logger.info("输入文件：%s，输出目录：%s", input_file, output_dir)

    try:
        categorizer = Categorizer(config)
        result = categorizer.categorize_file(input_file, output_dir)
    except CategorizerError as exc:
        raise SystemExit(f"分类失败：{exc}") from exc

    print("中文内容已分类并写入输出文件。")
    lines: List[str] = []
    for category, count in result.summary().items():
        filename = config.category_files.get(category, category.filename)
        lines.append(f"- {filename}: {count}")
    print("\n".join(lines))


if __name__ == "__main__":
    main()
