import os
import pytest
from unittest.mock import patch
from rpmsite.cli import main
from rpmsite.cliparser import build_parser


def touch(path, content='rpm'):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'w') as f:
        f.write(content)


def fake_query(package):
    # flightctl-agent-0.8.1-1.el9.x86_64.rpm -> 0.8.1
    version = os.path.basename(str(package)).split('-')[2]

    class Query:
        def query(self):
            return version
    return Query()


@pytest.fixture
def tools():
    with patch('rpmsite.utils.runcreaterepo.CreaterepoWrapper') as mock_cr_class:
        with patch('rpmsite.core.VersionSet.RpmQueryWrapper', side_effect=fake_query):
            yield mock_cr_class


def test_parser_defaults():
    parser = build_parser()
    args = parser.parse_args(['create'])
    assert args.copr_download_dir == '.output/copr-rpms-temp'
    assert args.repo_output_dir is None
    args = parser.parse_args(['merge', 'downloads'])
    assert args.copr_download_dir == 'downloads'
    assert args.repo_output_dir == '.'
    args = parser.parse_args(['regenerate-html', 'owner', 'name'])
    assert (args.repo_owner, args.repo_name, args.repo_dir) == ('owner', 'name', '.')


def test_cli_missing_source(tmp_path, monkeypatch, capsys, tools):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        main(['create', 'nope', 'out'])
    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert 'ERROR: COPR download directory not found: nope' in captured.err


def test_cli_empty_source(tmp_path, monkeypatch, capsys, tools):
    monkeypatch.chdir(tmp_path)
    os.makedirs('downloads/epel-9-x86_64')
    with pytest.raises(SystemExit) as excinfo:
        main(['merge', 'downloads', 'repo'])
    assert excinfo.value.code == 1
    assert 'ERROR: No RPM files found in downloads' in capsys.readouterr().err
    assert not os.path.exists('repo')


def test_cli_create(tmp_path, monkeypatch, capsys, tools):
    monkeypatch.chdir(tmp_path)
    touch('downloads/epel-9-x86_64/flightctl-agent-0.8.1-1.el9.x86_64.rpm')
    touch('downloads/fedora-42-x86_64/flightctl-agent-0.8.10-1.fc42.x86_64.rpm')
    touch('styles.css', 'body {}')
    assert main(['create', 'downloads', 'out', 'flightctl', 'flightctl']) == 0

    assert sorted(os.listdir('out')) == [
        'epel-9-x86_64',
        'fedora-42-x86_64',
        'flightctl-epel.repo',
        'flightctl-fedora.repo',
        'index.html',
        'styles.css',
    ]
    assert os.path.exists('out/epel-9-x86_64/index.html')
    assert tools.call_count == 2
    captured = capsys.readouterr()
    assert 'Detected latest version: 0.8.10' in captured.out
    assert 'WARNING: platform-styles.css not found' in captured.err


def test_cli_merge_then_regenerate_html(tmp_path, monkeypatch, capsys, tools):
    monkeypatch.chdir(tmp_path)
    touch('downloads/epel-9-x86_64/flightctl-agent-0.9.0-1.el9.x86_64.rpm')
    touch('repo/epel/9/x86_64/flightctl-agent-0.8.1-1.el9.x86_64.rpm')
    touch('repo/foo.txt', 'extra')
    assert main(['merge', 'downloads', 'repo']) == 0
    assert sorted(os.listdir('repo/epel/9/x86_64')) == [
        'flightctl-agent-0.8.1-1.el9.x86_64.rpm',
        'flightctl-agent-0.9.0-1.el9.x86_64.rpm',
    ]

    assert main(['regenerate-html', '--repo-dir', 'repo']) == 0
    with open('repo/index.html') as f:
        root = f.read()
    assert 'foo.txt' not in root
    assert 'href="epel/"' in root
    assert "flightctl-*-0.9.*" in root
    assert os.path.exists('repo/epel/9/x86_64/index.html')
    assert 'All versions: 0.8.1 0.9.0' in capsys.readouterr().out


def test_cli_regenerate_metadata(tmp_path, monkeypatch, tools):
    monkeypatch.chdir(tmp_path)
    touch('epel/9/x86_64/a.rpm')
    touch('fedora/42/x86_64/b.rpm')
    touch('.output/copr-rpms-temp/epel-9-x86_64/c.rpm')
    assert main(['regenerate-metadata']) == 0
    assert tools.call_count == 2


def test_cli_regenerate_html_without_rpms(tmp_path, monkeypatch, capsys, tools):
    monkeypatch.chdir(tmp_path)
    os.makedirs('repo/epel/9/x86_64')
    touch('repo/flightctl-epel.repo', '[flightctl]')
    assert main(['regenerate-html', '--repo-dir', 'repo']) == 0
    with open('repo/index.html') as f:
        root = f.read()
    assert "flightctl-*-.*'" in root
    assert 'flightctl-epel.repo' in root
    assert os.path.exists('repo/epel/9/x86_64/index.html')
    out = capsys.readouterr().out
    assert 'Processing 0 existing RPM files' in out
    assert 'Total packages: 0' in out
