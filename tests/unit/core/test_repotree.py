import os
from rpmsite.core.RepoTree import RepoTree


def touch(path, content='x', mtime=None):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'w') as f:
        f.write(content)
    if mtime is not None:
        os.utime(path, (mtime, mtime))


def make_repo(root):
    touch(f'{root}/epel/9/x86_64/flightctl-agent-0.8.1-1.el9.x86_64.rpm', 'rpm' * 10)
    touch(f'{root}/epel/9/x86_64/repodata/repomd.xml', '<repomd/>')
    touch(f'{root}/fedora/42/aarch64/flightctl-cli-0.8.1-1.fc42.aarch64.rpm')
    touch(f'{root}/flightctl-epel.repo')
    touch(f'{root}/styles.css')
    touch(f'{root}/index.html')
    touch(f'{root}/epel/index.html')
    touch(f'{root}/.output/copr-rpms-temp/x/foo.rpm')


def test_repotree_scan_categories(tmp_path):
    make_repo(tmp_path)
    tree = RepoTree.scan(str(tmp_path), categories=['epel', 'fedora', 'missing'])
    assert tree.directories() == [
        '.',
        'epel',
        'epel/9',
        'epel/9/x86_64',
        'epel/9/x86_64/repodata',
        'fedora',
        'fedora/42',
        'fedora/42/aarch64',
    ]
    assert tree.listing('.output') is None


def test_repotree_listing_sorted_without_index(tmp_path):
    make_repo(tmp_path)
    tree = RepoTree.scan(str(tmp_path), categories=['epel', 'fedora'])
    assert tree.listing('.').names() == ['epel', 'fedora', 'flightctl-epel.repo', 'styles.css']
    assert tree.listing('epel').names() == ['9']
    listing = tree.listing('epel/9/x86_64')
    assert listing.names() == ['flightctl-agent-0.8.1-1.el9.x86_64.rpm', 'repodata']
    rpm = listing.get('flightctl-agent-0.8.1-1.el9.x86_64.rpm')
    assert not rpm.is_dir
    assert rpm.size == 30
    assert listing.get('repodata').is_dir
    assert listing.get('repodata').size is None


def test_repotree_scan_all_skips_output(tmp_path):
    make_repo(tmp_path)
    tree = RepoTree.scan(str(tmp_path))
    assert tree.listing('.output') is None
    assert tree.listing('epel/9') is not None


def test_repotree_dir_mtime_is_newest_below(tmp_path):
    touch(f'{tmp_path}/epel/9/old.rpm', mtime=1000)
    touch(f'{tmp_path}/epel/9/new.rpm', mtime=2000000000)
    os.utime(f'{tmp_path}/epel/9', (1000, 1000))
    tree = RepoTree.scan(str(tmp_path), categories=['epel'])
    assert tree.listing('epel').get('9').mtime == 2000000000


def test_repotree_skips_dangling_links(tmp_path):
    make_repo(tmp_path)
    os.symlink(f'{tmp_path}/nonexistent', f'{tmp_path}/epel/9/x86_64/latest.rpm')
    os.symlink(f'{tmp_path}/nonexistent', f'{tmp_path}/broken')
    tree = RepoTree.scan(str(tmp_path), categories=['epel'])
    assert tree.listing('epel/9/x86_64').names() == ['flightctl-agent-0.8.1-1.el9.x86_64.rpm', 'repodata']
    assert 'broken' not in tree.listing('.').names()


def test_repotree_hides_dotfiles(tmp_path):
    make_repo(tmp_path)
    touch(f'{tmp_path}/epel/9/.gitkeep')
    touch(f'{tmp_path}/epel/.cache/data')
    tree = RepoTree.scan(str(tmp_path), categories=['epel'])
    assert tree.listing('epel/9').names() == ['x86_64']
    assert tree.listing('epel').names() == ['9']
    assert tree.listing('epel/.cache') is None


def test_repotree_root_names(tmp_path):
    make_repo(tmp_path)
    tree = RepoTree.scan(str(tmp_path), categories=['epel'],
                         root_names=['epel', 'fedora', 'flightctl-epel.repo', 'flightctl-fedora.repo'])
    assert tree.listing('.').names() == ['epel', 'fedora', 'flightctl-epel.repo']
