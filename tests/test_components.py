import pytest

from redwood.exceptions import InvalidRoot, UnknownComponentKind
from redwood.view import ComponentKind, ComponentRegistry


def test_default_components(site):
    registry = ComponentRegistry(site)

    assert registry.descriptor('page').directory == site.resolve() / 'pages'
    assert registry.descriptor('page').extension == '.html'
    assert registry.descriptor(ComponentKind.CONTEXT).directory == site.resolve() / 'contexts'
    assert registry.descriptor(ComponentKind.CONTEXT).extension == '.py'
    assert registry.descriptor('partial').directory.name == 'partials'
    assert registry.descriptor('layout').directory.name == 'layouts'


def test_only_context_is_code(site):
    registry = ComponentRegistry(site)

    assert registry.descriptor('context').is_code
    assert not registry.descriptor('page').is_code
    assert not registry.descriptor('partial').is_code
    assert not registry.descriptor('layout').is_code


def test_missing_root_is_rejected(tmp_path):
    with pytest.raises(InvalidRoot) as exc:
        ComponentRegistry(tmp_path / 'nope')

    assert exc.value.context['root'] == tmp_path / 'nope'


def test_file_root_is_rejected(tmp_path):
    root = tmp_path / 'file.txt'
    root.write_text('x')

    with pytest.raises(InvalidRoot):
        ComponentRegistry(root)


def test_unknown_kind(site):
    registry = ComponentRegistry(site)

    with pytest.raises(UnknownComponentKind):
        registry.descriptor('stylesheet')
    assert 'stylesheet' not in registry
    assert 'page' in registry


def test_overrides_apply_at_construction(site):
    registry = ComponentRegistry(site, {'page': {'dir': 'views', 'ext': 'j2'}})

    assert registry.descriptor('page').directory == site.resolve() / 'views'
    assert registry.descriptor('page').extension == '.j2'
    # Untouched kinds keep their defaults
    assert registry.descriptor('partial').extension == '.html'


def test_overrides_cannot_add_kinds(site):
    with pytest.raises(UnknownComponentKind):
        ComponentRegistry(site, {'stylesheet': {'dir': 'css', 'ext': '.css'}})


def test_descriptors_are_read_only(site):
    registry = ComponentRegistry(site)

    with pytest.raises(TypeError):
        registry.descriptors()[ComponentKind.PAGE] = None
