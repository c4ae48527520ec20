import pytest

from redwood.exceptions import ConfigException, ConfigNotFound, InvalidRoot
from redwood.support import Config, ConfigObject, resolve_config_path
from redwood.view import ViewEngine


@pytest.fixture
def project(tmp_path, site, write_file):
    """site lives in tmp_path/src; put a config file next to it"""
    write_file(tmp_path, '.redwood.yaml', '''
        app:
          name: demo
        view:
          root: src
          output: public
        logging:
          Level: DEBUG
    ''')
    return tmp_path


class TestResolveConfigPath:
    def test_finds_file_in_start_dir(self, project):
        assert resolve_config_path(project) == project.resolve() / '.redwood.yaml'

    def test_ascends_to_parent(self, project):
        nested = project / 'src' / 'pages'

        assert resolve_config_path(nested) == project.resolve() / '.redwood.yaml'

    def test_defaults_to_cwd(self, project, monkeypatch):
        monkeypatch.chdir(project / 'src')

        assert resolve_config_path() == project.resolve() / '.redwood.yaml'

    def test_not_found_at_root(self, tmp_path):
        with pytest.raises(ConfigNotFound) as exc:
            resolve_config_path(tmp_path, file_name='.no-such-config-file.yaml')

        assert exc.value.context['start_dir'] == tmp_path.resolve()


class TestConfig:
    def test_dot_notation(self, project):
        Config.load(project / '.redwood.yaml')

        assert Config.get('app.name') == 'demo'
        assert Config.get('VIEW.Root') == 'src'
        assert Config.get('logging.level') == 'DEBUG'
        assert Config.get('view.missing', 'fallback') == 'fallback'
        assert Config.get('app.name.deeper') is None
        assert Config.has('view.output')
        assert not Config.has('view.missing')

    def test_runtime_overrides(self, project):
        Config.load(project / '.redwood.yaml')
        Config.set('app.name', 'other')

        assert Config.get('app.name') == 'other'
        Config.clear_runtime_overrides()
        assert Config.get('app.name') == 'demo'

    def test_load_drops_runtime_overrides(self, project, tmp_path, write_file):
        Config.load(project / '.redwood.yaml')
        Config.set('app.env', 'production')
        other = write_file(tmp_path, 'other/.redwood.yaml', 'app:\n  name: other\n')

        Config.load(other)

        assert Config.get('app.env') is None
        assert Config.get('app.name') == 'other'

    def test_base_path(self, project):
        Config.load(project / '.redwood.yaml')

        assert Config.base_path('src') == project.resolve() / 'src'

    def test_as_object(self, project):
        Config.load(project / '.redwood.yaml')
        view = Config.as_object('view')

        assert isinstance(view, ConfigObject)
        assert view.output == 'public'
        with pytest.raises(AttributeError):
            view.nope

    def test_empty_file(self, tmp_path):
        path = tmp_path / '.redwood.yaml'
        path.write_text('')

        assert Config.load(path) == {}

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / '.redwood.yaml'
        path.write_text('view: [unclosed')

        with pytest.raises(ConfigException):
            Config.load(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / '.redwood.yaml'
        path.write_text('- a\n- b\n')

        with pytest.raises(ConfigException):
            Config.load(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigException):
            Config.load(tmp_path / 'absent.yaml')


class TestEngineFromConfig:
    def test_builds_engine_at_view_root(self, project):
        engine = ViewEngine.from_config(project / '.redwood.yaml')

        assert engine.root == project.resolve() / 'src'
        assert engine.render('home') == '<h1>Hello</h1>\n'

    def test_searches_upwards(self, project, monkeypatch):
        monkeypatch.chdir(project / 'src' / 'pages')

        assert ViewEngine.from_config().root == project.resolve() / 'src'

    def test_env_file_sets_app_env(self, project, monkeypatch, write_file):
        monkeypatch.setenv('APP_ENV', 'placeholder')
        monkeypatch.delenv('APP_ENV')
        write_file(project, '.env', 'APP_ENV=production\n')

        ViewEngine.from_config(project / '.redwood.yaml')

        assert Config.get('app.env') == 'production'

    def test_second_project_does_not_inherit_app_env(self, project, tmp_path, monkeypatch, write_file):
        monkeypatch.setenv('APP_ENV', 'placeholder')
        monkeypatch.delenv('APP_ENV')
        write_file(project, '.env', 'APP_ENV=production\n')
        ViewEngine.from_config(project / '.redwood.yaml')
        monkeypatch.delenv('APP_ENV')
        other = tmp_path / 'other'
        write_file(other, 'src/pages/.keep', '')
        write_file(other, '.redwood.yaml', 'view:\n  root: src\n')

        ViewEngine.from_config(other / '.redwood.yaml')

        assert Config.get('app.env') is None

    def test_default_layout_from_config(self, project, write_file):
        write_file(project, '.redwood.yaml', '''
            view:
              root: src
              default_layout: main
        ''')
        write_file(project, 'src/layouts/main.html', '<body>{{ content }}</body>')

        engine = ViewEngine.from_config(project / '.redwood.yaml')

        assert engine.render('home') == '<body><h1>Hello</h1>\n</body>'

    def test_bad_root(self, project, write_file):
        write_file(project, '.redwood.yaml', 'view:\n  root: nowhere\n')

        with pytest.raises(InvalidRoot):
            ViewEngine.from_config(project / '.redwood.yaml')
