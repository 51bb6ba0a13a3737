from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from ..config import KataConfig
from ..domain.services.document_checks import check_actual, check_format
from ..errors import InvalidArgumentError
from .models import SendFilesResult

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from ..domain.entities.document import Certificate, File
    from .models import SendFilesRequest
    from .ports.services import (
        CryptographerPort,
        LoggerPort,
        RecognizerPort,
        SenderPort,
    )


@dataclass(slots=True)
class FileSenderDependencies:
    cryptographer: CryptographerPort
    sender: SenderPort
    recognizer: RecognizerPort
    logger: LoggerPort


class FileSender:
    """Recognizes, checks, signs and sends files one by one.

    A file that fails any stage is reported as skipped and does not affect
    the others. Stages after the failing one are not invoked for that file.
    """

    def __init__(
        self,
        dependencies: FileSenderDependencies,
        *,
        config: KataConfig | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._cryptographer = dependencies.cryptographer
        self._sender = dependencies.sender
        self._recognizer = dependencies.recognizer
        self._config = config or KataConfig()
        self._clock = clock or datetime.now

    def execute(self, request: SendFilesRequest) -> SendFilesResult:
        return self.send_files(request.files, request.certificate)

    def send_files(
        self, files: Iterable[File] | None, certificate: Certificate
    ) -> SendFilesResult:
        if files is None:
            raise InvalidArgumentError("files")
        result = SendFilesResult()
        for file in files:
            result.total += 1
            reason = self._try_send_file(file, certificate)
            if reason is not None:
                self.logger.log_file_skipped(file.name, reason)
                result.skipped_files.append(file)
        self.logger.log_send_summary(result.total, len(result.skipped_files))
        return result

    def _try_send_file(self, file: File, certificate: Certificate) -> str | None:
        recognized, document = self._recognizer.try_recognize(file)
        if not recognized or document is None:
            return "not recognized"
        if not check_format(document, self._config.accepted_formats):
            return f"unsupported format {document.format!r}"
        if not check_actual(
            document, now=self._clock(), max_age_months=self._config.max_age_months
        ):
            return f"created {document.created:%Y-%m-%d}, older than allowed"
        signed_content = self._cryptographer.sign(document.content, certificate)
        if not self._sender.try_send(signed_content):
            return "send failed"
        self.logger.log_file_sent(file.name)
        return None
