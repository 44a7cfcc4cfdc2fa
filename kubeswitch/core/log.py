# core/log.py
# CLI 출력용 로거를 만드는 유틸리티입니다.
# 타임스탬프와 레벨 이름 없이 "메시지 key=value" 형태로 stderr 에 출력하며,
# 경고는 노란색, 오류는 빨간색으로 표시합니다.
# 로거는 전역 루트 로거에 등록하지 않고 만들어서 필요한 곳에 직접 넘겨줍니다.

import logging
from typing import Any, Dict

import click  # 색상 출력과 터미널 판별을 위해 사용합니다.

# 레벨별 출력 색상입니다.
LEVEL_COLORS = {
    logging.WARNING: "yellow",
    logging.ERROR: "red",
    logging.CRITICAL: "red",
}


def fields(**values: Any) -> Dict[str, Any]:
    """로그 호출의 extra 인자로 넘길 key=value 필드를 만듭니다."""
    return {"fields": values}


class CLIFormatter(logging.Formatter):
    """메시지 뒤에 extra 로 받은 필드를 key=value 로 덧붙이는 포매터입니다."""

    def format(self, record: logging.LogRecord) -> str:
        text = record.getMessage()
        for key, value in getattr(record, "fields", {}).items():
            text += f" {key}={value}"
        color = LEVEL_COLORS.get(record.levelno)
        return click.style(text, fg=color) if color else text


class ClickEchoHandler(logging.Handler):
    """click.echo 로 stderr 에 쓰는 핸들러입니다. 터미널이 아니면 색상은 제거됩니다."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def build_cli_logger(name: str = "kubeswitch", verbose: bool = False) -> logging.Logger:
    """
    CLI 명령에서 사용할 로거를 새로 만듭니다.

    Args:
        name (str): 로거 이름.
        verbose (bool): True 이면 DEBUG 메시지도 출력합니다.

    Returns:
        logging.Logger: 루트 로거와 연결되지 않은 독립 로거.
    """
    logger = logging.Logger(name, logging.DEBUG if verbose else logging.INFO)
    handler = ClickEchoHandler()
    handler.setFormatter(CLIFormatter())
    logger.addHandler(handler)
    logger.propagate = False
    return logger
