import logging

import pytest

from authtui.core.errors import StoreWriteError
from authtui.store import (
    SecretsStore,
    export_secrets,
    import_secrets,
    load_secrets,
    save_secrets,
)

A = "otpauth://totp/a?secret=JBSWY3DPEHPK3PXP"
B = "otpauth://totp/b?secret=JBSWY3DPEHPK3PXP"
C = "otpauth://totp/c?secret=JBSWY3DPEHPK3PXP"
D = "otpauth://totp/d?secret=JBSWY3DPEHPK3PXP"


def test_missing_file_loads_empty(tmp_path):
    assert load_secrets(str(tmp_path / "nope")) == []


def test_unreadable_source_loads_empty(tmp_path):
    assert load_secrets(str(tmp_path)) == []


def test_load_keeps_only_otpauth_lines_in_order(secrets_file):
    secrets_file.write_text(f"# my codes\n{B}\n\nhttps://example.com\n{A}\r\n  {C}\n")
    assert load_secrets(str(secrets_file)) == [B, A]


def test_save_load_round_trip_is_exact(secrets_file, tmp_path):
    source = f"{A}\n{B}\n{C}"
    secrets_file.write_text(source)
    out = tmp_path / "out.txt"
    save_secrets(str(out), load_secrets(str(secrets_file)))
    assert out.read_text() == source


def test_round_trip_drops_foreign_lines(secrets_file):
    secrets_file.write_text(f"{A}\n# comment\n\n{B}")
    save_secrets(str(secrets_file), load_secrets(str(secrets_file)))
    assert secrets_file.read_text() == f"{A}\n{B}"


def test_save_overwrites(secrets_file):
    secrets_file.write_text("old content that is much longer than the new one")
    save_secrets(str(secrets_file), [A])
    assert secrets_file.read_text() == A


def test_save_failure_raises_store_write_error(tmp_path):
    with pytest.raises(StoreWriteError) as exc_info:
        save_secrets(str(tmp_path), [A])
    assert exc_info.value.context["path"] == str(tmp_path)
    assert isinstance(exc_info.value.__cause__, OSError)


def test_import_appends_new_lines_and_counts_all_incoming():
    result = import_secrets([A, B], [B, C, D])
    assert result.merged == [A, B, C, D]
    assert result.incoming_count == 3
    assert result.appended_count == 2


def test_import_does_not_mutate_current():
    current = [A]
    import_secrets(current, [B])
    assert current == [A]


def test_import_dedups_within_incoming():
    result = import_secrets([], [C, C, A])
    assert result.merged == [C, A]
    assert result.incoming_count == 3


def test_store_import_persists(secrets_file, tmp_path):
    secrets_file.write_text(f"{A}\n{B}")
    incoming = tmp_path / "incoming.txt"
    incoming.write_text(f"{B}\n{C}\n{D}\n")

    store = SecretsStore(str(secrets_file))
    result = store.import_from(str(incoming))

    assert result.incoming_count == 3
    assert len(store) == 4
    assert load_secrets(str(secrets_file)) == [A, B, C, D]


def test_store_import_into_missing_file_creates_it(secrets_file, tmp_path):
    incoming = tmp_path / "incoming.txt"
    incoming.write_text(A)
    SecretsStore(str(secrets_file)).import_from(str(incoming))
    assert secrets_file.read_text() == A


def test_export_writes_all_entries(secrets_file, tmp_path):
    secrets_file.write_text(f"{A}\n{B}")
    dest = tmp_path / "export.txt"
    count = SecretsStore(str(secrets_file)).export_to(str(dest))
    assert count == 2
    assert dest.read_text() == f"{A}\n{B}"


def test_export_failure_raises(tmp_path):
    with pytest.raises(StoreWriteError):
        export_secrets([A], str(tmp_path))


def test_missing_file_is_logged_at_debug(tmp_path, authtui_logs):
    load_secrets(str(tmp_path / "nope"))
    assert [r.levelno for r in authtui_logs.records] == [logging.DEBUG]


def test_undecodable_file_loads_empty_with_warning(secrets_file, authtui_logs):
    secrets_file.write_bytes(b"\xff" + A.encode())
    assert load_secrets(str(secrets_file)) == []
    warnings = [r for r in authtui_logs.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "Could not read secrets file" in warnings[0].getMessage()
