# Copyright (C) 2022 randkit contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Test randkit command line dispatch and startup checks
"""

import argparse
import os
import re

from randkit.common import self_check
from randkit.common.logger import logger
from randkit.tool import core


def make_config(**kwargs):
    values = dict(action="string", iterations=1, verbose=False, quiet=True, debug=False,
                  log_file=None, bound=100, min=0, max=100, duration=1.0, factor=0.2,
                  length=16, alphabet="alphanum")
    values.update(kwargs)
    return argparse.Namespace(**values)


def run(**kwargs):
    out = []
    ret = core.start(make_config(**kwargs), out=out.append)
    return ret, out


def test_tool_int():
    ret, out = run(action="int", bound=7, iterations=50)
    assert(ret == 0)
    assert(len(out) == 50)
    assert(all(0 <= val < 7 for val in out))


def test_tool_range():
    ret, out = run(action="range", min=-3, max=3, iterations=50)
    assert(ret == 0)
    assert(all(-3 <= val < 3 for val in out))


def test_tool_float():
    ret, out = run(action="float", iterations=50)
    assert(ret == 0)
    assert(all(0.0 <= val < 1.0 for val in out))


def test_tool_jitter():
    ret, out = run(action="jitter", duration=10.0, factor=0.5, iterations=50)
    assert(ret == 0)
    assert(all(5.0 <= val < 15.0 for val in out))


def test_tool_string_named_alphabets():
    ret, out = run(action="string", length=12, alphabet="digits", iterations=20)
    assert(ret == 0)
    assert(all(re.fullmatch(r"[0-9]{12}", s) for s in out))

    ret, out = run(action="string", length=12, alphabet="alphanum", iterations=20)
    assert(all(re.fullmatch(r"[a-z0-9]{12}", s) for s in out))


def test_tool_string_literal_alphabet():
    ret, out = run(action="string", length=30, alphabet="xy")
    assert(ret == 0)
    assert(re.fullmatch(r"[xy]{30}", out[0]))


def test_tool_rejects_invalid_range():
    ret, out = run(action="range", min=5, max=5)
    assert(ret == 1), "empty range must fail"
    assert(out == [])


def test_tool_log_file(tmp_path):
    log_file = str(tmp_path / "randkit.log")
    ret, out = run(action="float", debug=True, log_file=log_file)
    assert(ret == 0)
    assert(logger.log_file is None), "log file left open"
    with open(log_file) as f:
        assert("Generating 1 value(s) for action <float>" in f.read())


def test_self_check():
    assert(self_check.check_version())
    assert(self_check.check_packages())
    assert(self_check.self_check())


def test_self_check_no_entropy(monkeypatch):

    def broken_urandom(n):
        raise NotImplementedError("no entropy")

    monkeypatch.setattr(os, "urandom", broken_urandom)
    assert(not self_check.check_entropy_source())
    assert(self_check.self_check()), "missing entropy source is not fatal"


def test_logging_after_log_file_run(tmp_path, monkeypatch):
    log_file = str(tmp_path / "randkit.log")
    ret, out = run(action="string", debug=True, log_file=log_file)
    assert(ret == 0)

    # file logging ended with the run, console logging keeps working
    logger.warn("after run")
    logger.error("after run")

    def broken_urandom(n):
        raise OSError("no entropy")

    monkeypatch.setattr(os, "urandom", broken_urandom)
    assert(not self_check.check_entropy_source())

    with open(log_file) as f:
        assert("after run" not in f.read())


def test_tool_rejects_overflowing_jitter():
    ret, out = run(action="jitter", duration=1e30)
    assert(ret == 1), "overflowing duration must fail with an error"
    assert(out == [])
