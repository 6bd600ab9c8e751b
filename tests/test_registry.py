"""Tests for command name normalization and the command registry."""

import pytest

from dockercli.errors import RegistryDefinitionError
from dockercli.registry import COMMAND_NAMES, CommandRegistry, canonical_key

from .conftest import RecordingHandler


def _full_registry() -> tuple[CommandRegistry, dict[str, RecordingHandler]]:
    handlers = {name: RecordingHandler(name) for name in COMMAND_NAMES}
    return CommandRegistry(handlers.items()), handlers


class TestCanonicalKey:
    """Tests for canonical_key."""

    @pytest.mark.parametrize(
        ('token', 'expected'),
        [
            ('ps', 'CmdPs'),
            ('PS', 'CmdPs'),
            ('pS', 'CmdPs'),
            ('Info', 'CmdInfo'),
            ('rMI', 'CmdRmi'),
            ('x', 'CmdX'),
        ],
    )
    def test_normalizes_case(self, token: str, expected: str) -> None:
        """Test that the first letter is upper-cased and the rest lower-cased."""
        assert canonical_key(token) == expected

    def test_empty_token_has_no_key(self) -> None:
        """Test that the empty string never produces a key."""
        assert canonical_key('') is None


class TestResolve:
    """Tests for CommandRegistry.resolve."""

    @pytest.mark.parametrize('name', COMMAND_NAMES)
    def test_every_casing_resolves_to_same_handler(self, name: str) -> None:
        """Test that casing variants of each supported command resolve identically."""
        registry, handlers = _full_registry()
        mixed = ''.join(ch.upper() if i % 2 else ch for i, ch in enumerate(name))

        for variant in (name, name.upper(), name.capitalize(), mixed):
            assert registry.resolve(variant) is handlers[name]

    def test_empty_token_not_found(self) -> None:
        """Test that the empty token never resolves, not even to help."""
        registry, _ = _full_registry()
        assert registry.resolve('') is None

    def test_unknown_token_not_found(self) -> None:
        """Test that unsupported commands do not resolve."""
        registry, _ = _full_registry()
        assert registry.resolve('frobnicate') is None
        assert 'frobnicate' not in registry

    def test_registry_exposes_canonical_keys(self) -> None:
        """Test iteration, length and membership."""
        registry, _ = _full_registry()
        assert len(registry) == len(COMMAND_NAMES)
        assert 'CmdPs' in set(registry)
        assert 'RUN' in registry


class TestRegistryDefinition:
    """Tests for construction-time consistency checks."""

    def test_identical_duplicate_is_accepted(self) -> None:
        """Test that repeating the same pairing is harmless."""
        attach = RecordingHandler('attach')
        registry = CommandRegistry([('attach', attach), ('attach', attach)])
        assert registry.resolve('attach') is attach
        assert len(registry) == 1

    def test_conflicting_duplicate_is_rejected(self) -> None:
        """Test that one key can never map to two different handlers."""
        with pytest.raises(RegistryDefinitionError, match='more than one handler'):
            CommandRegistry(
                [
                    ('attach', RecordingHandler('attach')),
                    ('ATTACH', RecordingHandler('attach')),
                ],
            )

    def test_unsupported_name_is_rejected(self) -> None:
        """Test that the table is closed to names outside the command set."""
        with pytest.raises(RegistryDefinitionError, match='unsupported command'):
            CommandRegistry([('frobnicate', RecordingHandler('frobnicate'))])

    def test_empty_name_is_rejected(self) -> None:
        """Test that an empty name cannot be registered."""
        with pytest.raises(RegistryDefinitionError):
            CommandRegistry([('', RecordingHandler('help'))])
