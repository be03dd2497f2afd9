# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Oxford Quantum Circuits Ltd
import json
import logging

import pytest

from pulsetrace.config import TraceConfig
from pulsetrace.ir.instructions import Pulse
from pulsetrace.trace.tracer import trace
from pulsetrace.utils.logger import (
    BasicLogger,
    CompositeLogger,
    FileLoggerHandler,
    LoggerLevel,
    get_default_logger,
    get_logger_config,
)


class TestLogger:
    def test_default_logger_is_composite(self):
        log = get_default_logger()
        assert isinstance(log, CompositeLogger)
        assert log is get_default_logger()
        assert isinstance(logging.getLogger("pulsetrace"), BasicLogger)

    def test_inactive_loggers_are_skipped(self, tmp_path):
        config_file = tmp_path / "logger_settings.json"
        config_file.write_text(
            json.dumps(
                {
                    "version": 1,
                    "disable_existing_loggers": False,
                    "handlers": {},
                    "loggers": {
                        "pulsetrace.test.active": {"level": "DEBUG"},
                        "pulsetrace.test.inactive": {"active": False},
                    },
                }
            )
        )
        log = get_logger_config(str(config_file))
        assert [logger.name for logger in log.loggers] == ["pulsetrace.test.active"]
        assert log.isEnabledFor(logging.DEBUG)

    def test_file_handler_is_created_on_first_record(self, tmp_path):
        path = tmp_path / "logs" / "trace.log"
        handler = FileLoggerHandler(str(path))
        logger = logging.getLogger("pulsetrace.test.file")
        logger.addHandler(handler)
        try:
            assert not path.exists()
            logger.warning("first record")
            handler.flush()
            assert "first record" in path.read_text()
        finally:
            logger.removeHandler(handler)
            handler.close()

    @pytest.mark.parametrize(
        "log_events, level", [(False, LoggerLevel.DEBUG), (True, LoggerLevel.INFO)]
    )
    def test_emitted_events_are_logged(self, caplog, program, drive, flat, log_events, level):
        program.add(Pulse(frame=drive, waveform=flat(1.0)))
        with caplog.at_level(logging.DEBUG, logger="pulsetrace"):
            trace(program, TraceConfig(LOG_EVENTS=log_events))

        emitted = [record for record in caplog.records if "Emitted" in record.getMessage()]
        assert len(emitted) == 1
        assert emitted[0].levelno == level.value
