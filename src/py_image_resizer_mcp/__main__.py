"""Entry point for python -m py_image_resizer_mcp.

启动图像缩放 MCP 服务器；支持 --version 与 --log-level LEVEL。
"""

import sys


def main(argv: list[str] | None = None) -> None:
    """主入口函数"""
    args = sys.argv[1:] if argv is None else argv

    if args and args[0] in ("--version", "-v"):
        from . import __version__

        print(f"py-image-resizer-mcp {__version__}")
        return

    log_level = None
    if "--log-level" in args:
        index = args.index("--log-level")
        if index + 1 >= len(args):
            sys.exit("--log-level 需要一个参数，如 DEBUG")
        log_level = args[index + 1]

    from .mcp_server import main as server_main

    server_main(log_level)


if __name__ == "__main__":
    main()
