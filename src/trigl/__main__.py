"""
`python -m trigl` のエントリポイント。
"""

from trigl.api import run

if __name__ == "__main__":
    run()
