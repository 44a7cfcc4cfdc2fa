# core/picker.py
# 대화형으로 목록에서 하나를 고르는 선택기를 정의합니다.

from typing import Optional, Protocol, Sequence

import click  # 터미널 입력을 받기 위해 사용합니다.

from kubeswitch.core.errors import SelectionCancelledError


class Picker(Protocol):
    """문자열 목록에서 하나를 고르게 하는 선택기의 인터페이스입니다."""

    def select(self, message: str, options: Sequence[str], default: Optional[str] = None) -> str:
        ...


class ClickPicker:
    """
    번호가 매겨진 목록을 보여주고 번호나 이름을 입력받는 선택기입니다.
    기본값은 목록에서 '*' 로 표시되며 Enter 만 누르면 선택됩니다.
    모든 출력은 stderr 로 보냅니다.
    """

    def select(self, message: str, options: Sequence[str], default: Optional[str] = None) -> str:
        """
        사용자가 고른 항목을 반환합니다.

        Args:
            message (str): 프롬프트 메시지.
            options (Sequence[str]): 선택지 목록.
            default (Optional[str]): 미리 선택된 항목. 목록에 없으면 무시합니다.

        Returns:
            str: 선택된 항목.

        Raises:
            SelectionCancelledError: 선택지가 없거나 사용자가 입력을 중단한 경우 (Ctrl-C, EOF).
        """
        options = list(options)
        if not options:
            raise SelectionCancelledError("nothing to select")
        if default not in options:
            default = None

        click.echo(message, err=True)
        for index, option in enumerate(options, 1):
            marker = "*" if option == default else " "
            click.echo(f" {marker} {index}. {option}", err=True)

        while True:
            try:
                choice = click.prompt(
                    "Enter number or name", default=default, type=str, err=True
                ).strip()
            except click.Abort as err:
                raise SelectionCancelledError("selection cancelled") from err

            if choice in options:
                return choice
            if choice.isdigit() and 1 <= int(choice) <= len(options):
                return options[int(choice) - 1]
            click.echo(f"No match for {choice!r}", err=True)
