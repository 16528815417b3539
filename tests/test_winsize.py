"""Unit tests for ptyfork.winsize."""

import errno
import os
import struct
import termios
from unittest.mock import patch

import pytest

from ptyfork.errors import InvalidArgument, IoctlFailure
from ptyfork.models import WindowSize
from ptyfork.winsize import get_window_size, resize, window_size


@pytest.fixture
def pty_pair():
    master_fd, slave_fd = os.openpty()
    yield master_fd, slave_fd
    for fd in (master_fd, slave_fd):
        try:
            os.close(fd)
        except OSError:
            pass


class TestWindowSize:
    def test_defaults_to_80x30(self):
        assert window_size() == WindowSize(cols=80, rows=30)

    def test_both_dimensions(self):
        assert window_size(132, 43) == WindowSize(cols=132, rows=43)

    def test_cols_without_rows_is_rejected(self):
        with pytest.raises(InvalidArgument):
            window_size(cols=3)

    def test_rows_without_cols_is_rejected(self):
        with pytest.raises(InvalidArgument):
            window_size(rows=3)

    @pytest.mark.parametrize(
        "cols, rows",
        [(0, 30), (80, -1), (70000, 30), ("80", 30), (80, 30.5), (True, 30)],
    )
    def test_non_positive_or_non_integer_is_rejected(self, cols, rows):
        with pytest.raises(InvalidArgument):
            window_size(cols, rows)

    def test_invalid_argument_is_a_value_error(self):
        with pytest.raises(ValueError):
            window_size(cols=0, rows=0)


class TestResize:
    def test_sets_requested_geometry(self, pty_pair):
        master_fd, slave_fd = pty_pair
        resize(master_fd, 132, 43)

        assert get_window_size(master_fd) == WindowSize(cols=132, rows=43)
        assert get_window_size(slave_fd) == WindowSize(cols=132, rows=43)

    def test_no_size_resets_to_default(self, pty_pair):
        master_fd, _ = pty_pair
        resize(master_fd, 132, 43)
        resize(master_fd)

        assert get_window_size(master_fd) == WindowSize(cols=80, rows=30)

    def test_no_size_on_fresh_pty_sets_default(self, pty_pair):
        master_fd, _ = pty_pair
        resize(master_fd)

        assert get_window_size(master_fd) == WindowSize(cols=80, rows=30)

    def test_single_ioctl_carries_both_dimensions(self, pty_pair):
        master_fd, _ = pty_pair
        with patch("ptyfork.winsize.fcntl.ioctl") as mock_ioctl:
            resize(master_fd, 132, 43)

        mock_ioctl.assert_called_once_with(
            master_fd, termios.TIOCSWINSZ, struct.pack("HHHH", 43, 132, 0, 0)
        )

    def test_closed_descriptor_raises_ioctl_failure(self, pty_pair):
        master_fd, _ = pty_pair
        os.close(master_fd)

        with pytest.raises(IoctlFailure) as exc_info:
            resize(master_fd, 80, 24)

        assert exc_info.value.fd == master_fd
        assert exc_info.value.errno == errno.EBADF

    def test_non_terminal_descriptor_raises_ioctl_failure(self):
        read_fd, write_fd = os.pipe()
        try:
            with pytest.raises(IoctlFailure) as exc_info:
                resize(read_fd, 80, 24)
        finally:
            os.close(read_fd)
            os.close(write_fd)

        assert exc_info.value.errno == errno.ENOTTY
        assert f"fd {read_fd}" in str(exc_info.value)

    @pytest.mark.parametrize("fd", ["3", 3.0, None, True])
    def test_non_integer_descriptor_is_rejected(self, fd):
        with pytest.raises(InvalidArgument):
            resize(fd, 80, 24)

    def test_partial_size_is_rejected_before_ioctl(self, pty_pair):
        master_fd, _ = pty_pair
        with patch("ptyfork.winsize.fcntl.ioctl") as mock_ioctl:
            with pytest.raises(InvalidArgument):
                resize(master_fd, 132)

        mock_ioctl.assert_not_called()

    def test_non_numeric_size_is_rejected(self, pty_pair):
        master_fd, _ = pty_pair
        with pytest.raises(InvalidArgument):
            resize(master_fd, 132, "43")


class TestGetWindowSize:
    def test_reads_unsized_pty(self, pty_pair):
        master_fd, _ = pty_pair
        size = get_window_size(master_fd)

        assert size.cols >= 0
        assert size.rows >= 0

    def test_closed_descriptor_raises_ioctl_failure(self, pty_pair):
        master_fd, _ = pty_pair
        os.close(master_fd)

        with pytest.raises(IoctlFailure):
            get_window_size(master_fd)
