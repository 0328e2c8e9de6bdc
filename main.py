import sys

from minilang.cli import main

# 词法解析 -> 语法解析 -> 解释执行
# lexer -> parser -> interpreter


if __name__ == '__main__':
    sys.exit(main())
