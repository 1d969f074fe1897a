"""Unit tests for deleting reported docstrings and docstring entries."""

from __future__ import annotations

from pathlib import Path
import textwrap

from uselessdoc.config import CheckConfig
from uselessdoc.fix import DeleteFix
from uselessdoc.inspection import DocstringInspection
from uselessdoc.models.datatypes import FixResult


def _fix(source: str, config: CheckConfig) -> tuple[str, FixResult]:
    """Inspect dedented source, apply deletions and return original and result."""

    text = textwrap.dedent(source).lstrip("\n")
    _, problems = DocstringInspection(config).check_source(text, Path("module.py"))
    return text, DeleteFix().apply(text, problems)


def test_only_statement_docstring_is_replaced_by_pass(return_stop_config: CheckConfig) -> None:
    """Deleting the sole body statement should keep the function valid."""

    _, result = _fix(
        '''
        def get_name(self):
            """Returns the name."""
        ''',
        return_stop_config,
    )

    assert result.source == "def get_name(self):\n    pass\n"
    assert (result.removed, result.skipped) == (1, 0)


def test_docstring_is_removed_before_remaining_statements(return_stop_config: CheckConfig) -> None:
    """Docstrings followed by code should be deleted without a placeholder."""

    _, result = _fix(
        '''
        def get_name(self):
            """Returns
            the name.
            """
            return self._name
        ''',
        return_stop_config,
    )

    assert result.source == "def get_name(self):\n    return self._name\n"


def test_single_field_entry_is_removed(return_stop_config: CheckConfig) -> None:
    """Only the reported field-list entry should disappear."""

    _, result = _fix(
        '''
        def send(message, retries):
            """Deliver a message to the broker queue.

            :param message: The message.
            :param retries: How often to retry delivery.
            """
            return message
        ''',
        return_stop_config,
    )

    assert result.source == textwrap.dedent(
        '''\
        def send(message, retries):
            """Deliver a message to the broker queue.

            :param retries: How often to retry delivery.
            """
            return message
        '''
    )
    assert result.removed == 1


def test_google_section_header_is_removed_with_its_last_entry(
    return_stop_config: CheckConfig,
) -> None:
    """Removing every entry of an `Args:` section should remove its header too."""

    _, result = _fix(
        '''
        def send(message):
            """Deliver a message to the broker queue.

            Args:
                message: The message.
            """
            return message
        ''',
        return_stop_config,
    )

    assert result.source == textwrap.dedent(
        '''\
        def send(message):
            """Deliver a message to the broker queue.

            """
            return message
        '''
    )


def test_removing_last_entry_cascades_to_whole_docstring(return_stop_config: CheckConfig) -> None:
    """A docstring left without content should be deleted entirely."""

    _, result = _fix(
        '''
        def get_name(self):
            """:returns: The name."""
        ''',
        return_stop_config,
    )

    assert result.source == "def get_name(self):\n    pass\n"
    assert result.removed == 1


def test_docstring_sharing_definition_line_is_skipped(return_stop_config: CheckConfig) -> None:
    """Docstrings that share a line with other code are left untouched."""

    original, result = _fix('def get_name(self): """Returns the name."""\n', return_stop_config)

    assert result.source == original
    assert (result.removed, result.skipped) == (0, 1)


def test_unmapped_docstring_entry_is_skipped(return_stop_config: CheckConfig) -> None:
    """Entry deletion needs a line-for-line mapping between literal and value."""

    original, result = _fix(
        'def send(message):\n'
        '    """Deliver a message\\tto the broker queue.\n'
        '\n'
        '    :param message: The message.\n'
        '    """\n'
        '    return message\n',
        return_stop_config,
    )

    assert result.source == original
    assert result.skipped == 1


def test_multiple_entities_are_fixed_bottom_up(return_stop_config: CheckConfig) -> None:
    """Several deletions in one file should not disturb each other's line numbers."""

    _, result = _fix(
        '''
        class Account:
            """Ledger account with running balance."""

            def get_balance(self):
                """Returns the balance."""
                return self._balance

            def get_owner(self):
                """Returns the owner."""
                return self._owner
        ''',
        return_stop_config,
    )

    assert result.source == textwrap.dedent(
        '''\
        class Account:
            """Ledger account with running balance."""

            def get_balance(self):
                return self._balance

            def get_owner(self):
                return self._owner
        '''
    )
    assert result.removed == 2


def test_crlf_line_endings_are_preserved(return_stop_config: CheckConfig) -> None:
    """Replacement lines should reuse the source's line terminator."""

    source = 'def get_name(self):\r\n    """Returns the name."""\r\n'
    _, problems = DocstringInspection(return_stop_config).check_source(source, Path("crlf.py"))

    result = DeleteFix().apply(source, problems)

    assert result.source == "def get_name(self):\r\n    pass\r\n"


def test_crlf_parameter_entry_is_removed(return_stop_config: CheckConfig) -> None:
    """Entry deletion should work on multi-line docstrings with CRLF endings."""

    source = (
        "def scale(factor):\r\n"
        '    """Scale the current drawing canvas.\r\n'
        "\r\n"
        "    :param factor: factor\r\n"
        '    """\r\n'
        "    return factor\r\n"
    )
    _, problems = DocstringInspection(return_stop_config).check_source(source, Path("crlf.py"))

    result = DeleteFix().apply(source, problems)

    assert (result.removed, result.skipped) == (1, 0)
    assert result.source == (
        "def scale(factor):\r\n"
        '    """Scale the current drawing canvas.\r\n'
        "\r\n"
        '    """\r\n'
        "    return factor\r\n"
    )
