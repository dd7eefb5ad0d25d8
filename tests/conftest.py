"""
测试配置 - pytest配置文件

提供通用的牌组fixture和日志环境还原.
"""

import logging
import random

import pytest

from playing_deck import Deck
from playing_deck.core.config import PACKAGE_LOGGER


@pytest.fixture
def seeded_rng():
    """固定种子的随机数生成器fixture"""
    return random.Random(42)


@pytest.fixture
def standard_deck():
    """一副不含王牌的标准牌"""
    return Deck.build(1, 0)


@pytest.fixture
def deck_with_jokers(seeded_rng):
    """一副含两张王牌的牌组"""
    return Deck.build(1, 2, rng=seeded_rng)


@pytest.fixture
def restore_package_logger():
    """测试结束后恢复包日志记录器的级别和处理器"""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    level = package_logger.level
    handlers = list(package_logger.handlers)
    yield package_logger
    package_logger.setLevel(level)
    package_logger.handlers[:] = handlers
