"""
Retry engine: классификация статуса и пауза между попытками.

Включает:
- Классификацию статус-кода в SUCCESS / RETRY / FAIL (чистая функция)
- Бюджет попыток retry_count + 1
- Фиксированную паузу между попытками, прерываемую из другого потока
"""

import logging
import threading
from enum import Enum
from typing import Dict, Iterator, Optional

logger = logging.getLogger(__name__)

OK = 200
MULTIPLE_CHOICES = 300
FOUND = 302
BAD_REQUEST = 400
ENHANCE_YOUR_CALM = 420
INTERNAL_SERVER_ERROR = 500


class AttemptState(str, Enum):
    """Состояния запроса в цикле retry."""
    ATTEMPTING = "attempting"
    RETRYING = "retrying"
    SUCCESS = "success"
    FAILED = "failed"


class Outcome(str, Enum):
    """Решение по результату одной попытки."""
    SUCCESS = "success"
    RETRY = "retry"
    FAIL = "fail"

    @property
    def next_state(self) -> AttemptState:
        return _NEXT_STATE[self]


_NEXT_STATE = {
    Outcome.SUCCESS: AttemptState.SUCCESS,
    Outcome.RETRY: AttemptState.RETRYING,
    Outcome.FAIL: AttemptState.FAILED,
}


def is_success_code(status_code: int) -> bool:
    """
    Success-class статус: 2xx и 302.

    302 не выполняется автоматически и отдаётся вызывающему как успех.
    """
    if status_code < OK:
        return False
    if status_code == FOUND:
        return True
    return status_code < MULTIPLE_CHOICES


def classify(status_code: int, attempt: int, retry_count: int) -> Outcome:
    """
    Решить, что делать со статусом попытки.

    Args:
        status_code: HTTP статус
        attempt: Номер попытки, начиная с 0
        retry_count: Количество дополнительных попыток из конфига

    Returns:
        SUCCESS - вернуть ответ;
        FAIL - 400, 420, любой код < 500 или последняя попытка;
        RETRY - код >= 500 и бюджет не исчерпан

    Examples:
        >>> classify(302, 0, 3)
        <Outcome.SUCCESS: 'success'>
        >>> classify(400, 0, 5)
        <Outcome.FAIL: 'fail'>
        >>> classify(503, 0, 2), classify(503, 2, 2)
        (<Outcome.RETRY: 'retry'>, <Outcome.FAIL: 'fail'>)
    """
    if is_success_code(status_code):
        return Outcome.SUCCESS

    if (
        status_code == ENHANCE_YOUR_CALM
        or status_code == BAD_REQUEST
        or status_code < INTERNAL_SERVER_ERROR
        or attempt >= retry_count
    ):
        return Outcome.FAIL

    return Outcome.RETRY


class RetryEngine:
    """
    Бюджет попыток и пауза между ними.

    Пауза блокирует вызывающий поток ровно на retry_interval_seconds.
    interrupt() из другого потока прерывает паузы, идущие в этот момент:
    цикл просто переходит к следующей попытке, исключение не выбрасывается.
    Прерывание без идущей паузы ничего не делает и на следующие паузы
    не влияет. Каждая пауза ждёт на своём Event, поэтому один движок
    можно делить между потоками.

    Examples:
        >>> engine = RetryEngine(retry_count=2, retry_interval_seconds=5)
        >>> for attempt in engine.attempts():
        ...     outcome = classify(status, attempt, engine.retry_count)
        ...     if outcome is Outcome.RETRY:
        ...         engine.sleep()
    """

    def __init__(self, retry_count: int = 0, retry_interval_seconds: float = 5):
        """
        Args:
            retry_count: Количество дополнительных попыток
            retry_interval_seconds: Пауза между попытками (сек)
        """
        self.retry_count = retry_count
        self.retry_interval_seconds = retry_interval_seconds
        # thread ident -> Event текущей паузы этого потока
        self._pauses: Dict[int, threading.Event] = {}
        self._pauses_lock = threading.Lock()

    @property
    def max_attempts(self) -> int:
        return self.retry_count + 1

    def attempts(self) -> Iterator[int]:
        """Номера попыток 0..retry_count."""
        return iter(range(self.max_attempts))

    def is_last(self, attempt: int) -> bool:
        return attempt >= self.retry_count

    def classify(self, status_code: int, attempt: int) -> Outcome:
        return classify(status_code, attempt, self.retry_count)

    @property
    def sleeping(self) -> int:
        """Число потоков, которые сейчас в паузе."""
        with self._pauses_lock:
            return len(self._pauses)

    def sleep(self) -> None:
        """Пауза перед следующей попыткой."""
        logger.debug(
            f"Sleeping {self.retry_interval_seconds} seconds until the next retry."
        )
        if self.retry_interval_seconds <= 0:
            return

        ident = threading.get_ident()
        wakeup = threading.Event()
        with self._pauses_lock:
            self._pauses[ident] = wakeup
        try:
            if wakeup.wait(self.retry_interval_seconds):
                logger.debug("Retry sleep interrupted")
        finally:
            with self._pauses_lock:
                self._pauses.pop(ident, None)

    def interrupt(self, thread: Optional[threading.Thread] = None) -> None:
        """
        Прервать идущую паузу.

        Args:
            thread: Поток, чью паузу прервать (None - все идущие паузы)
        """
        with self._pauses_lock:
            if thread is None:
                pauses = list(self._pauses.values())
            else:
                pause = self._pauses.get(thread.ident)
                pauses = [pause] if pause is not None else []
        for wakeup in pauses:
            wakeup.set()
