import os
import logging
from typing import Optional
from dotenv import load_dotenv

# 加载环境变量
load_dotenv()

VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def check_log_level(level: str) -> str:
    normalized = (level or "").upper()
    if normalized not in VALID_LOG_LEVELS:
        logging.warning("Unknown GREETER_LOG_LEVEL %r, falling back to INFO", level)
        return "INFO"
    return normalized


def load_config() -> dict:
    """从环境变量读取配置，未设置时使用默认值。"""
    origins = os.getenv("GREETER_CORS_ORIGINS", "*")
    return {
        "GREETER_HOST": os.getenv("GREETER_HOST", "0.0.0.0"),
        "GREETER_PORT": int(os.getenv("GREETER_PORT", 8000)),
        "GREETER_LOG_LEVEL": check_log_level(os.getenv("GREETER_LOG_LEVEL", "INFO")),
        "GREETER_CORS_ORIGINS": [o.strip() for o in origins.split(",") if o.strip()],
    }


# 统一配置
CONFIG = load_config()


def printable_config(config: Optional[dict] = None) -> str:
    config = CONFIG if config is None else config
    return "\n".join(f"{k}: {v}" for k, v in config.items())
