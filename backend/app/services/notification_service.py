"""관리자 화면 토스트 메시지를 위한 알림 싱크입니다."""

import logging
from dataclasses import dataclass
from typing import List, Literal

logger = logging.getLogger(__name__)

Severity = Literal["info", "success", "warning", "error"]

SUPPORTED_SEVERITIES = {"info", "success", "warning", "error"}

_LOG_LEVELS = {
    "info": logging.INFO,
    "success": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


@dataclass(frozen=True)
class Toast:
    message: str
    severity: Severity = "info"


class Notifier:
    """반환값을 사용하지 않는 단방향 메시지 싱크입니다."""

    def notify(self, message: str, severity: Severity = "info") -> None:
        raise NotImplementedError


class ToastCollector(Notifier):
    """토스트를 발생 순서대로 보관해 응답으로 관리자 UI에 돌려줍니다."""

    def __init__(self):
        self.toasts: List[Toast] = []

    def notify(self, message: str, severity: Severity = "info") -> None:
        sev = (severity or "").strip().lower()
        if sev not in SUPPORTED_SEVERITIES:
            sev = "info"
        self.toasts.append(Toast(message=message, severity=sev))
        logger.log(_LOG_LEVELS[sev], "[notify][%s] %s", sev, message)

    def as_dicts(self) -> List[dict]:
        return [{"message": t.message, "severity": t.severity} for t in self.toasts]
