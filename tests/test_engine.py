import pytest

from redwood.exceptions import (
    AmbiguousRenderMode, ComponentNotFound, InvalidContextBinding, InvalidRenderOptions,
    InvalidRoot, InvalidViewName, TemplateRenderError,
)
from redwood.view import ContextRegistry, Scope, ViewEngine


@pytest.fixture
def engine(site):
    return ViewEngine(site)


def test_renders_page_with_context(engine):
    assert engine.render('home') == '<h1>Hello</h1>\n'


def test_render_shapes_agree(engine):
    expected = engine.render('home')

    assert engine.render(page='home') == expected
    assert engine.render({'page': 'home'}) == expected


def test_invalid_root(tmp_path):
    with pytest.raises(InvalidRoot):
        ViewEngine(tmp_path / 'missing')


def test_neither_page_nor_partial(engine):
    with pytest.raises(AmbiguousRenderMode):
        engine.render({})
    with pytest.raises(AmbiguousRenderMode):
        engine.render({'layout': 'main'})


def test_both_page_and_partial(engine):
    with pytest.raises(AmbiguousRenderMode):
        engine.render({'page': 'home', 'partial': 'header'})


def test_invalid_request_shape(engine):
    with pytest.raises(InvalidRenderOptions):
        engine.render(42)


def test_empty_view_name(engine):
    with pytest.raises(InvalidViewName):
        engine.render('   ')


def test_namespaced_page(engine, site, write_file):
    write_file(site, 'pages/homeblog.html', '<h1>{{ title }} from the blog</h1>')
    write_file(site, 'contexts/homeblog.py', '''
        from redwood.view import Scope


        class BlogHomeContext:
            def context(self):
                return Scope(title='Hi')
    ''')

    assert engine.render('home', namespace='blog') == '<h1>Hi from the blog</h1>'


def test_missing_page_never_loads_context(engine, site, write_file):
    marker = site / 'context-loaded'
    write_file(site, 'contexts/about.py', f'''
        from pathlib import Path
        Path({str(marker)!r}).touch()


        class AboutContext:
            pass
    ''')

    with pytest.raises(ComponentNotFound) as exc:
        engine.render('about')

    assert exc.value.context['kind'] == 'page'
    assert not marker.exists()


def test_missing_context(engine, site, write_file):
    write_file(site, 'pages/about.html', 'About')

    with pytest.raises(ComponentNotFound) as exc:
        engine.render('about')

    assert exc.value.context['kind'] == 'context'


@pytest.mark.parametrize('returned', ["'<h1>Hello</h1>'", 'None', "{'title': 'Hello'}"])
def test_context_must_return_scope(engine, site, write_file, returned):
    write_file(site, 'pages/about.html', '<h1>{{ title }}</h1>')
    write_file(site, 'contexts/about.py', f'''
        class AboutContext:
            def context(self):
                return {returned}
    ''')

    with pytest.raises(InvalidContextBinding):
        engine.render('about')


def test_locals_override_context(engine):
    assert engine.render('home', locals={'title': 'Local'}) == '<h1>Local</h1>\n'


def test_layout_wraps_page(engine, site, write_file):
    write_file(site, 'layouts/main.html', '<title>{{ title }}</title><main>{{ content }}</main>')

    html = engine.render('home', layout='main')

    assert html == '<title>Hello</title><main><h1>Hello</h1>\n</main>'


def test_missing_layout_is_an_error(engine):
    with pytest.raises(ComponentNotFound) as exc:
        engine.render('home', layout='missing')

    assert exc.value.context['kind'] == 'layout'


def test_default_layout(site, write_file):
    write_file(site, 'layouts/main.html', '[{{ content }}]')
    engine = ViewEngine(site, default_layout='main')

    assert engine.render('home') == '[<h1>Hello</h1>\n]'


def test_partial_is_returned_verbatim(engine, site, write_file):
    write_file(site, 'partials/header.html', '<header>{{ not_rendered }}</header>')

    assert engine.render(partial='header') == '<header>{{ not_rendered }}</header>'


def test_partial_ignores_locals(engine, site, write_file):
    write_file(site, 'partials/header.html', '<header>{{ user }}</header>')

    html = engine.render({'partial': 'header', 'locals': {'user': 'ada'}})

    assert html == '<header>{{ user }}</header>'


def test_missing_partial(engine):
    with pytest.raises(ComponentNotFound):
        engine.render(partial='footer')


def test_page_can_include_partial(engine, site, write_file):
    write_file(site, 'partials/nav.html', '<nav></nav>')
    write_file(site, 'pages/home.html', "{{ partial('nav') }}<h1>{{ title }}</h1>")

    assert engine.render('home') == '<nav></nav><h1>Hello</h1>'


def test_values_are_not_escaped(engine, site, write_file):
    write_file(site, 'contexts/home.py', '''
        from redwood.view import Scope


        class HomeContext:
            def context(self):
                return Scope(title='<em>raw</em>')
    ''')

    assert engine.render('home') == '<h1><em>raw</em></h1>\n'


def test_undefined_variable(engine, site, write_file):
    write_file(site, 'pages/home.html', '{{ missing }}')

    with pytest.raises(TemplateRenderError) as exc:
        engine.render('home')

    assert exc.value.context['view'] == 'home'


def test_template_syntax_error(engine, site, write_file):
    write_file(site, 'pages/home.html', '{% if %}')

    with pytest.raises(TemplateRenderError):
        engine.render('home')


def test_templates_are_not_cached(engine, site, write_file):
    assert engine.render('home') == '<h1>Hello</h1>\n'

    write_file(site, 'pages/home.html', '<h2>{{ title }}</h2>')

    assert engine.render('home') == '<h2>Hello</h2>'


def test_registered_context(site, write_file):
    write_file(site, 'pages/about.html', '{{ who }}')
    contexts = ContextRegistry()

    @contexts.context('about')
    class About:
        def context(self):
            return Scope(who='us')

    assert ViewEngine(site, contexts=contexts).render('about') == 'us'


def test_component_overrides(tmp_path, write_file):
    write_file(tmp_path, 'views/home.j2', '{{ title }}')
    write_file(tmp_path, 'contexts/home.py', '''
        from redwood.view import Scope


        class HomeContext:
            def context(self):
                return Scope(title='Hello')
    ''')
    engine = ViewEngine(tmp_path, components={'page': {'dir': 'views', 'ext': '.j2'}})

    assert engine.render('home') == 'Hello'


def test_page_names(engine, site, write_file):
    write_file(site, 'pages/about.html', '')
    write_file(site, 'pages/notes.txt', '')

    assert engine.page_names() == ['about', 'home']


def test_views_recover_namespaces(engine, site, write_file):
    write_file(site, 'pages/homeblog.html', '<h1>{{ title }}</h1>')
    write_file(site, 'contexts/homeblog.py', '''
        from redwood.view import Scope


        class BlogHomeContext:
            def context(self):
                return Scope(title='Blog')
    ''')

    assert engine.views() == [('home', 'home', ''), ('homeblog', 'home', 'blog')]
    assert engine.render('home', namespace='blog') == '<h1>Blog</h1>'
