"""Tests for the file sender use case.

Collaborators are Mock objects configured for the happy path in
setup_method; each test only states what is specific to it.
"""

from datetime import datetime, timedelta
from io import StringIO
from unittest.mock import Mock

import pytest
from rich.console import Console

from mock_kata.application.file_sender import FileSender, FileSenderDependencies
from mock_kata.application.models import SendFilesRequest
from mock_kata.application.ports.services import (
    CryptographerPort,
    RecognizerPort,
    SenderPort,
)
from mock_kata.config import KataConfig
from mock_kata.domain.entities import Certificate, Document, File
from mock_kata.domain.services import add_months
from mock_kata.errors import InvalidArgumentError
from mock_kata.infrastructure.logging import ConsoleLogger, LogLevel, NullLogger

NOW = datetime(2024, 5, 15, 12, 0, 0)


class TestFileSender:
    """Tests for FileSender.send_files."""

    def setup_method(self):
        self.certificate = Certificate(subject="CN=test")
        self.file = File("someFile", b"\x01\x02\x03")
        self.signed_content = b"\x01\x07"
        self.document = Document.from_file(self.file, created=NOW, format="4.0")

        self.cryptographer = Mock(spec=CryptographerPort)
        self.sender = Mock(spec=SenderPort)
        self.recognizer = Mock(spec=RecognizerPort)

        self.recognizer.try_recognize.return_value = (True, self.document)
        self.cryptographer.sign.return_value = self.signed_content
        self.sender.try_send.return_value = True

        self.file_sender = self._create_sender()

    def _create_sender(self, **kwargs):
        dependencies = FileSenderDependencies(
            cryptographer=self.cryptographer,
            sender=self.sender,
            recognizer=self.recognizer,
            logger=kwargs.pop("logger", NullLogger()),
        )
        return FileSender(dependencies, clock=lambda: NOW, **kwargs)

    @pytest.mark.parametrize("format", ["4.0", "3.1"])
    def test_send_when_good_format(self, format):
        self.document.format = format

        result = self.file_sender.send_files([self.file], self.certificate)

        assert result.skipped_files == []
        self.sender.try_send.assert_called_once_with(self.signed_content)

    @pytest.mark.parametrize("format", ["0.0", None])
    def test_skip_when_bad_format(self, format):
        self.document.format = format

        result = self.file_sender.send_files([self.file], self.certificate)

        assert result.skipped_files == [self.file]
        self.cryptographer.sign.assert_not_called()
        self.sender.try_send.assert_not_called()

    def test_signs_document_content_with_certificate(self):
        self.file_sender.send_files([self.file], self.certificate)

        self.cryptographer.sign.assert_called_once_with(
            self.document.content, self.certificate
        )

    def test_independently_send_when_all_files_are_good(self):
        result = self.file_sender.send_files(
            [self.file, self.file, self.file], self.certificate
        )

        assert result.skipped_files == []
        assert result.total == 3
        assert result.sent_count == 3
        assert self.sender.try_send.call_count == 3

    def test_skip_when_older_than_a_month(self):
        self.document.created = add_months(NOW, -1) - timedelta(seconds=1)

        result = self.file_sender.send_files([self.file], self.certificate)

        assert result.skipped_files == [self.file]
        self.sender.try_send.assert_not_called()

    def test_skip_when_exactly_a_month_old(self):
        self.document.created = add_months(NOW, -1)

        result = self.file_sender.send_files([self.file], self.certificate)

        assert result.skipped_files == [self.file]

    def test_send_when_younger_than_a_month(self):
        self.document.created = add_months(NOW, -1) + timedelta(seconds=1)

        result = self.file_sender.send_files([self.file], self.certificate)

        assert result.all_sent

    def test_send_when_created_in_the_future(self):
        self.document.created = NOW + timedelta(seconds=1)

        result = self.file_sender.send_files([self.file], self.certificate)

        assert result.all_sent

    def test_skip_when_send_fails(self):
        self.sender.try_send.return_value = False

        result = self.file_sender.send_files([self.file], self.certificate)

        assert result.skipped_files == [self.file]

    def test_skip_when_not_recognized(self):
        self.recognizer.try_recognize.return_value = (False, None)

        result = self.file_sender.send_files([self.file], self.certificate)

        assert result.skipped_files == [self.file]

    def test_do_not_try_send_file_when_not_recognized(self):
        self.recognizer.try_recognize.return_value = (False, None)

        self.file_sender.send_files([self.file], self.certificate)

        self.cryptographer.sign.assert_not_called()
        self.sender.try_send.assert_not_called()

    def test_independently_send_when_some_files_are_not_recognized(self):
        bad_file = File("badFile", b"\x00")
        self.recognizer.try_recognize.side_effect = lambda file: (
            (True, self.document) if file is self.file else (False, None)
        )

        result = self.file_sender.send_files(
            [bad_file, self.file, bad_file], self.certificate
        )

        assert result.skipped_files == [bad_file, bad_file]
        self.sender.try_send.assert_called_once_with(self.signed_content)

    def test_independently_send_when_some_files_could_not_send(self):
        other_file = File("otherFile", b"\x04")
        other_document = Document.from_file(other_file, created=NOW, format="3.1")
        other_signed = b"\x09"
        self.recognizer.try_recognize.side_effect = lambda file: (
            (True, self.document) if file is self.file else (True, other_document)
        )
        self.cryptographer.sign.side_effect = lambda content, _certificate: (
            self.signed_content if content == self.document.content else other_signed
        )
        self.sender.try_send.side_effect = lambda content: content == other_signed

        result = self.file_sender.send_files(
            [self.file, other_file], self.certificate
        )

        assert result.skipped_files == [self.file]
        assert result.sent_count == 1

    def test_empty_file_list(self):
        result = self.file_sender.send_files([], self.certificate)

        assert result.total == 0
        assert result.all_sent
        self.recognizer.try_recognize.assert_not_called()

    def test_none_files_raises(self):
        with pytest.raises(InvalidArgumentError, match="files"):
            self.file_sender.send_files(None, self.certificate)

    def test_execute_uses_request(self):
        request = SendFilesRequest(files=[self.file], certificate=self.certificate)

        result = self.file_sender.execute(request)

        assert result.all_sent
        self.recognizer.try_recognize.assert_called_once_with(self.file)


class TestFileSenderConfiguration:
    """Accepted formats and maximum age come from KataConfig."""

    def setup_method(self):
        self.file = File("doc", b"\x01")
        self.document = Document.from_file(self.file, created=NOW, format="5.0")
        self.recognizer = Mock(spec=RecognizerPort)
        self.recognizer.try_recognize.return_value = (True, self.document)
        self.cryptographer = Mock(spec=CryptographerPort)
        self.cryptographer.sign.return_value = b"signed"
        self.sender = Mock(spec=SenderPort)
        self.sender.try_send.return_value = True

    def _send(self, config: KataConfig):
        dependencies = FileSenderDependencies(
            cryptographer=self.cryptographer,
            sender=self.sender,
            recognizer=self.recognizer,
            logger=NullLogger(),
        )
        sender = FileSender(dependencies, config=config, clock=lambda: NOW)
        return sender.send_files([self.file], Certificate(subject="CN=test"))

    def test_custom_accepted_formats(self):
        assert self._send(KataConfig()).skipped_files == [self.file]
        assert self._send(KataConfig(accepted_formats=("5.0",))).all_sent

    def test_custom_max_age(self):
        self.document.format = "4.0"
        self.document.created = add_months(NOW, -2) + timedelta(days=1)

        assert self._send(KataConfig()).skipped_files == [self.file]
        assert self._send(KataConfig(max_age_months=3)).all_sent


class TestFileSenderLogging:
    """Skipped files and the run summary are reported to the logger."""

    def test_logs_skip_reason_and_summary(self):
        file = File("someFile", b"\x01")
        recognizer = Mock(spec=RecognizerPort)
        recognizer.try_recognize.return_value = (False, None)
        logger = Mock()
        dependencies = FileSenderDependencies(
            cryptographer=Mock(spec=CryptographerPort),
            sender=Mock(spec=SenderPort),
            recognizer=recognizer,
            logger=logger,
        )

        FileSender(dependencies, clock=lambda: NOW).send_files(
            [file], Certificate(subject="CN=test")
        )

        logger.log_file_skipped.assert_called_once_with("someFile", "not recognized")
        logger.log_send_summary.assert_called_once_with(1, 1)


class TestFileSenderConsoleOutput:
    """File names and skip reasons reach a rich console as plain text."""

    def setup_method(self):
        self.buffer = StringIO()
        self.logger = ConsoleLogger(
            console=Console(file=self.buffer, force_terminal=False, width=200),
            verbosity=LogLevel.DEBUG,
        )
        self.cryptographer = Mock(spec=CryptographerPort)
        self.cryptographer.sign.return_value = b"\x07"
        self.sender = Mock(spec=SenderPort)
        self.sender.try_send.return_value = True
        self.recognizer = Mock(spec=RecognizerPort)
        self.recognizer.try_recognize.side_effect = lambda file: (
            True,
            Document.from_file(file, created=NOW, format=file.name),
        )
        self.file_sender = FileSender(
            FileSenderDependencies(
                cryptographer=self.cryptographer,
                sender=self.sender,
                recognizer=self.recognizer,
                logger=self.logger,
            ),
            clock=lambda: NOW,
        )

    def test_markup_in_format_is_skipped_and_printed_verbatim(self):
        file = File("[/x]", b"\x01")

        result = self.file_sender.send_files([file], Certificate(subject="CN=test"))

        assert result.skipped_files == [file]
        assert "Skipped [/x]: unsupported format '[/x]'" in self.buffer.getvalue()

    def test_markup_in_file_name_is_sent(self):
        self.recognizer.try_recognize.side_effect = None
        self.recognizer.try_recognize.return_value = (
            True,
            Document("[bold]", b"\x01", created=NOW, format="4.0"),
        )
        file = File("[bold]", b"\x01")

        result = self.file_sender.send_files([file], Certificate(subject="CN=test"))

        assert result.all_sent
        assert "Sent [bold]" in self.buffer.getvalue()

    def test_markup_file_does_not_stop_the_batch(self):
        bad = File("[/x]", b"\x01")
        good = File("4.0", b"\x02")

        result = self.file_sender.send_files(
            [bad, good], Certificate(subject="CN=test")
        )

        assert result.skipped_files == [bad]
        self.sender.try_send.assert_called_once_with(b"\x07")
        assert self.logger.get_stats()["files_sent"] == 1
        assert self.logger.get_stats()["files_skipped"] == 1
