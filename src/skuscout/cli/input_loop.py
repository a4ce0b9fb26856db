# ⌨️ skuscout/cli/input_loop.py
"""
⌨️ Рядковий цикл введення ідентифікаторів.

🔹 Кожен рядок обрізається; порожній рядок → очищення екрана і новий запит вводу.
🔹 `quit` / `exit` / EOF / Ctrl-C завершують цикл.
🔹 Наступний запит вводу показується лише після завершення попереднього запиту.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

# 🧩 Внутрішні модулі проєкту
from skuscout.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.cli.input")

PROMPT: str = "\n\nPlease enter SKU: "
QUIT_WORDS = frozenset({"quit", "exit"})

ReadLine = Callable[[str], str]


class InputLoop:
    """⌨️ Читає ідентифікатори й передає їх обробнику по одному."""

    def __init__(
        self,
        handle: Callable[[str], Awaitable[Any]],
        *,
        read_line: ReadLine = input,
        clear_screen: Optional[Callable[[], None]] = None,
        prompt: str = PROMPT,
    ) -> None:
        self._handle = handle
        self._read_line = read_line
        self._clear_screen = clear_screen
        self._prompt = prompt

    async def run(self) -> int:
        """
        Крутить цикл до `quit`/`exit`/EOF.

        Returns:
            int: Кількість оброблених ідентифікаторів.
        """
        handled = 0
        while True:
            try:
                line = await asyncio.to_thread(self._read_line, self._prompt)
            except (EOFError, KeyboardInterrupt):
                logger.info("👋 Кінець вводу")
                break

            identifier = (line or "").strip()
            if not identifier:
                if self._clear_screen is not None:
                    self._clear_screen()
                continue
            if identifier.lower() in QUIT_WORDS:
                logger.info("👋 Завершення за командою %s", identifier)
                break

            await self._handle(identifier)
            handled += 1
        return handled


__all__ = ["InputLoop", "PROMPT", "QUIT_WORDS"]
