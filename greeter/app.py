import logging
import argparse
import uvicorn
from .routers import greet
from .config import CONFIG, printable_config
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    application = FastAPI(title="greeter")

    # --- 配置 CORS ---
    application.add_middleware(
        CORSMiddleware,
        allow_origins=CONFIG["GREETER_CORS_ORIGINS"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # --- 包含路由 ---
    application.include_router(greet.router, prefix="", tags=["greetings"])
    return application


app = create_app()


def build_logging_config(verbose: bool = False, level: str = "INFO") -> dict:
    """返回传给 uvicorn 的 logging.config 字典。verbose 时应用日志为 DEBUG 级别。"""
    app_level = "DEBUG" if verbose else level
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "()": "uvicorn.logging.DefaultFormatter",
                "fmt": "%(levelprefix)s %(asctime)s - %(name)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
                "use_colors": None,
            },
            "access": {
                "()": "uvicorn.logging.AccessFormatter",
                "fmt": '%(levelprefix)s %(asctime)s - %(client_addr)s - "%(request_line)s" %(status_code)s',
                "datefmt": "%Y-%m-%d %H:%M:%S",
                "use_colors": None,
            },
        },
        "handlers": {
            "default": {
                "formatter": "default",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
            },
            "access": {
                "formatter": "access",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "": {
                "handlers": ["default"],
                "level": app_level,
                "propagate": False,
            },
            "greeter": {
                "handlers": ["default"],
                "level": app_level,
                "propagate": False,
            },
            "uvicorn.error": {
                "level": "INFO",
                "handlers": ["default"],
                "propagate": False,
            },
            "uvicorn.access": {
                "handlers": ["access"],
                "level": "INFO",
                "propagate": False,
            },
        },
    }


def main(argv=None):
    parser = argparse.ArgumentParser(description='启动 greeter FastAPI 服务')
    parser.add_argument('-v', '--verbose', action='store_true', help='启用 DEBUG 级别的日志记录')
    parser.add_argument('--host', type=str, default=CONFIG["GREETER_HOST"], help='服务监听的主机地址')
    parser.add_argument('--port', type=int, default=CONFIG["GREETER_PORT"], help='服务监听的端口')
    parser.add_argument('--reload', action='store_true', help='启用热重载模式 (用于开发)')
    args = parser.parse_args(argv)

    log_config = build_logging_config(args.verbose, CONFIG["GREETER_LOG_LEVEL"])
    logger.debug("Configuration loaded:\n%s", printable_config())
    logger.info("启动 greeter 服务，监听地址 %s:%s, Debug 日志: %s, 热重载: %s",
                args.host, args.port, args.verbose, args.reload)

    uvicorn.run(
        "greeter.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=log_config,
    )


# --- 主程序入口 ---
if __name__ == '__main__':
    main()
