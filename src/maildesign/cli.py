"""
命令行入口
parse: HTML -> 设计稿 JSON
render: 设计稿 JSON -> HTML（可同时输出纯文本）
text: HTML -> 纯文本
"""

import argparse
import json
import sys
from pathlib import Path

from loguru import logger

from .config import configure_logging
from .design2html import extract_text, render
from .html2design import parse


def _read_input(path: str) -> str | None:
    """读取输入文件；不存在时返回 None"""
    source = Path(path)
    if not source.is_file():
        logger.error(f"输入文件不存在: {source}")
        return None
    return source.read_text(encoding="utf-8")


def _write_output(content: str, output: str | None) -> None:
    """写入文件，未指定时输出到 stdout"""
    if output:
        Path(output).write_text(content, encoding="utf-8")
        logger.info(f"已写入: {output}")
    else:
        sys.stdout.write(content)
        if not content.endswith("\n"):
            sys.stdout.write("\n")


def cmd_parse(args: argparse.Namespace) -> int:
    html = _read_input(args.input)
    if html is None:
        return 1

    design = parse(html)
    if design is None:
        logger.warning("输入为空，未生成设计稿")
        return 1

    _write_output(design.to_json(), args.output)
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    text = _read_input(args.input)
    if text is None:
        return 1

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"设计稿不是有效的 JSON: {e}")
        return 1

    if not isinstance(data, dict):
        logger.error("设计稿顶层必须是 JSON 对象")
        return 1

    html = render(data)
    if not html:
        logger.error("设计稿为空或结构无效，未生成 HTML")
        return 1

    _write_output(html, args.output)
    if args.text:
        Path(args.text).write_text(extract_text(html), encoding="utf-8")
        logger.info(f"纯文本已写入: {args.text}")
    return 0


def cmd_text(args: argparse.Namespace) -> int:
    html = _read_input(args.input)
    if html is None:
        return 1

    _write_output(extract_text(html), args.output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maildesign",
        description="邮件 HTML 与设计稿 JSON 互相转换",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例:
  maildesign parse newsletter.html -o design.json
  maildesign render design.json -o email.html --text email.txt
  maildesign text email.html
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="输出调试日志")
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="HTML 转设计稿 JSON")
    parse_cmd.add_argument("input", help="输入 HTML 文件路径")
    parse_cmd.add_argument("-o", "--output", help="输出 JSON 文件路径（默认 stdout）")
    parse_cmd.set_defaults(func=cmd_parse)

    render_cmd = subparsers.add_parser("render", help="设计稿 JSON 转 HTML")
    render_cmd.add_argument("input", help="输入设计稿 JSON 文件路径")
    render_cmd.add_argument("-o", "--output", help="输出 HTML 文件路径（默认 stdout）")
    render_cmd.add_argument("--text", help="同时输出纯文本到该路径")
    render_cmd.set_defaults(func=cmd_render)

    text_cmd = subparsers.add_parser("text", help="提取 HTML 纯文本")
    text_cmd.add_argument("input", help="输入 HTML 文件路径")
    text_cmd.add_argument("-o", "--output", help="输出文本文件路径（默认 stdout）")
    text_cmd.set_defaults(func=cmd_text)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
