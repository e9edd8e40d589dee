# -*- coding: utf-8 -*-
"""
ログ設定。起動時に configure_logging() を1回だけ呼び、
以降は各モジュールで logging.getLogger(__name__) を使う。
標準出力へ JSON 1行ずつ出す。
"""
import logging
import sys

from pythonjsonlogger.json import JsonFormatter


def configure_logging(log_level: str = "INFO") -> None:
    level = getattr(logging, log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    handler.setLevel(level)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)
