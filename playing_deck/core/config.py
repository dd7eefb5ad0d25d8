"""
牌组配置相关类的实现
包含牌组构建参数和日志设置
"""

import logging
import os
import random
from dataclasses import dataclass
from typing import Mapping, Optional

from .deck.types import STANDARD_DECK_SIZE
from .exceptions import DeckConfigError

PACKAGE_LOGGER = "playing_deck"

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _read_int(environ: Mapping[str, str], key: str) -> Optional[int]:
    raw = environ.get(key)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise DeckConfigError(f"{key} must be an integer, got {raw!r}") from e


@dataclass
class DeckConfig:
    """
    牌组构建配置
    seed为None时洗牌结果不可重现
    """
    num_decks: int = 1                 # 标准牌副数
    num_jokers_per_deck: int = 0       # 每副牌的王牌数
    seed: Optional[int] = None         # 随机种子，用于可重现的洗牌

    def __post_init__(self):
        """验证配置的有效性"""
        for name in ("num_decks", "num_jokers_per_deck"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise DeckConfigError(f"{name} must be an int, got {type(value).__name__}")
            if value < 0:
                raise DeckConfigError(f"{name} must be non-negative, got {value}")

        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise DeckConfigError(f"seed must be an int or None, got {type(self.seed).__name__}")

    @property
    def typical_size(self) -> int:
        """按此配置构建的牌组张数"""
        return self.num_decks * (STANDARD_DECK_SIZE + self.num_jokers_per_deck)

    def make_rng(self) -> random.Random:
        """创建随机数生成器，有种子时结果可重现"""
        if self.seed is not None:
            return random.Random(self.seed)
        return random.Random()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'DeckConfig':
        """
        从环境变量读取配置
        DECK_NUM_DECKS / DECK_JOKERS_PER_DECK / DECK_SEED，未设置的项使用默认值
        """
        if environ is None:
            environ = os.environ

        overrides = {}
        for field_name, key in (("num_decks", "DECK_NUM_DECKS"),
                                ("num_jokers_per_deck", "DECK_JOKERS_PER_DECK"),
                                ("seed", "DECK_SEED")):
            value = _read_int(environ, key)
            if value is not None:
                overrides[field_name] = value
        return cls(**overrides)


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'WARNING'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def __post_init__(self):
        if not isinstance(self.log_level, str):
            raise DeckConfigError(f"log_level must be a str, got {type(self.log_level).__name__}")
        self.log_level = self.log_level.upper()
        if self.log_level not in _VALID_LOG_LEVELS:
            raise DeckConfigError(f"unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'LoggingConfig':
        """从 DECK_LOG_LEVEL 读取日志级别"""
        if environ is None:
            environ = os.environ
        level = environ.get("DECK_LOG_LEVEL")
        return cls(log_level=level) if level else cls()

    def apply(self) -> logging.Logger:
        """
        将配置应用到包日志记录器
        仅在没有控制台流处理器时添加一个，重复调用不会重复输出；文件处理器不受影响
        """
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(getattr(logging, self.log_level))

        stream_handlers = [h for h in package_logger.handlers
                           if type(h) is logging.StreamHandler]
        if not stream_handlers:
            handler = logging.StreamHandler()
            package_logger.addHandler(handler)
            stream_handlers.append(handler)
        for handler in stream_handlers:
            handler.setFormatter(logging.Formatter(self.log_format))
        return package_logger
