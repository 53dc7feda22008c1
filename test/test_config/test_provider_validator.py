import dataclasses

import pytest

from buildkit_provider.config.provider import (
    ProviderConfig, RegistryAuth, DEFAULT_BUILDKIT_HOST,
    ProviderConfigValidator, validate_provider_config
)
from buildkit_provider.core.enums import DiagnosticKind, DiagnosticSeverity


class TestProviderConfigValidator:
    """Test defaults and registry_auth validation of the provider domain."""

    def setup_method(self):
        self.validator = ProviderConfigValidator()

    def test_default_host_when_absent(self):
        config, diagnostics = validate_provider_config({})

        assert len(diagnostics) == 0
        assert config.buildkit_host == "unix:///var/run/buildkit/buildkitd.sock"
        assert config.buildkit_host == DEFAULT_BUILDKIT_HOST

    def test_default_host_when_null(self):
        config, diagnostics = validate_provider_config({'buildkit_host': None})

        assert not diagnostics
        assert config.buildkit_host == DEFAULT_BUILDKIT_HOST

    def test_host_passes_through_unchanged(self):
        config, _ = validate_provider_config({'buildkit_host': 'tcp://host:1234'})
        assert config.buildkit_host == 'tcp://host:1234'

    def test_host_is_not_normalized(self):
        config, _ = validate_provider_config({'buildkit_host': '  tcp://host:1234 '})
        assert config.buildkit_host == '  tcp://host:1234 '

    def test_empty_host_is_accepted(self):
        config, diagnostics = validate_provider_config({'buildkit_host': ''})

        assert not diagnostics
        assert config.buildkit_host == ''

    def test_complete_entry_accepted(self):
        config, diagnostics = validate_provider_config({
            'registry_auth': [{'address': 'a', 'username': 'u', 'password': 'p'}]
        })

        assert len(diagnostics) == 0
        assert config.registry_auth == (RegistryAuth(address='a', username='u', password='p'),)

    def test_entry_order_preserved(self):
        entries = [
            {'address': 'first', 'username': 'u1', 'password': 'p1'},
            {'address': 'second', 'username': 'u2', 'password': 'p2'},
            {'address': 'third', 'username': 'u3', 'password': 'p3'},
        ]
        config, _ = validate_provider_config({'registry_auth': entries})

        assert config.registry_addresses() == ('first', 'second', 'third')

    @pytest.mark.parametrize("missing", ["address", "username", "password"])
    def test_incomplete_entry_rejected(self, missing):
        entry = {'address': 'a', 'username': 'u', 'password': 'p'}
        del entry[missing]

        config, diagnostics = validate_provider_config({'registry_auth': [entry]})

        assert config is None
        assert len(diagnostics) == 1
        assert diagnostics[0].kind == DiagnosticKind.INVALID_REGISTRY_AUTH
        assert diagnostics[0].severity == DiagnosticSeverity.ERROR

    def test_null_field_rejected(self):
        config, diagnostics = validate_provider_config({
            'registry_auth': [{'address': 'a', 'username': None, 'password': 'p'}]
        })

        assert config is None
        assert diagnostics.has_error()

    def test_empty_string_fields_accepted(self):
        config, diagnostics = validate_provider_config({
            'registry_auth': [{'address': '', 'username': '', 'password': ''}]
        })

        assert not diagnostics
        assert len(config.registry_auth) == 1

    def test_fail_fast_on_first_invalid_entry(self):
        config, diagnostics = validate_provider_config({
            'registry_auth': [
                {'address': 'a', 'username': 'u'},
                {'address': 'b', 'username': 'v', 'password': 'q'},
            ]
        })

        assert config is None
        assert len(diagnostics) == 1

    def test_fail_fast_with_several_invalid_entries(self):
        config, diagnostics = validate_provider_config({
            'registry_auth': [{'address': 'a'}, {'username': 'u'}, {}]
        })

        assert config is None
        assert len(diagnostics) == 1

    def test_diagnostic_is_coarse(self):
        _, diagnostics = validate_provider_config({
            'registry_auth': [
                {'address': 'a', 'username': 'u', 'password': 'p'},
                {'address': 'b', 'username': 'u'},
            ]
        })

        diagnostic = diagnostics[0]
        assert diagnostic.summary == "Invalid Registry Auth Configuration"
        assert diagnostic.detail == (
            "All fields (address, username, password) must be provided for each registry_auth block."
        )
        assert diagnostic.attribute is None

    def test_diagnostic_never_echoes_password(self):
        _, diagnostics = validate_provider_config({
            'registry_auth': [{'username': 'u', 'password': 'hunter2'}]
        })

        assert all('hunter2' not in str(d) for d in diagnostics)

    @pytest.mark.parametrize("registry_auth", [None, []])
    def test_absent_or_empty_list(self, registry_auth):
        config, diagnostics = validate_provider_config({'registry_auth': registry_auth})

        assert not diagnostics
        assert config.registry_auth == ()

    def test_missing_list(self):
        config, _ = validate_provider_config({'buildkit_host': 'tcp://x:1'})
        assert config.registry_auth == ()

    def test_validate_returns_result_object(self):
        result = self.validator.validate({})

        assert result.is_valid
        assert isinstance(result.value, ProviderConfig)

    def test_fresh_config_per_call(self):
        raw = {'registry_auth': [{'address': 'a', 'username': 'u', 'password': 'p'}]}
        first, _ = validate_provider_config(raw)
        second, _ = validate_provider_config(raw)

        assert first == second
        assert first is not second

    def test_raw_input_not_mutated(self):
        raw = {'registry_auth': [{'address': 'a', 'username': 'u', 'password': 'p'}]}
        validate_provider_config(raw)

        assert raw == {'registry_auth': [{'address': 'a', 'username': 'u', 'password': 'p'}]}


class TestProviderConfig:
    """Test the canonical configuration objects."""

    def test_config_is_immutable(self):
        config = ProviderConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.buildkit_host = "tcp://other:1"

    def test_registry_auth_is_immutable(self):
        auth = RegistryAuth(address='a', username='u', password='p')

        with pytest.raises(dataclasses.FrozenInstanceError):
            auth.password = 'changed'

    def test_repr_hides_password(self):
        config = ProviderConfig(registry_auth=(RegistryAuth('a', 'u', 'hunter2'),))

        assert 'hunter2' not in repr(config)
        assert "address='a'" in repr(config)

    def test_to_dict_excludes_password_by_default(self):
        config = ProviderConfig(registry_auth=(RegistryAuth('a', 'u', 'p'),))

        assert config.to_dict() == {
            'buildkit_host': DEFAULT_BUILDKIT_HOST,
            'registry_auth': [{'address': 'a', 'username': 'u'}]
        }
        assert config.to_dict(include_sensitive=True)['registry_auth'][0]['password'] == 'p'
