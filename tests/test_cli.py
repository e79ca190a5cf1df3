import pytest

libvirt = pytest.importorskip('libvirt')

from libvirtenum.conn import LibVirtConnection  # NOQA: E402
from virshenum import cli  # NOQA: E402
from virshenum import settings  # NOQA: E402
from virshenum.context import setting  # NOQA: E402


@pytest.fixture(autouse=True)
def clean_settings(tmp_path):
    with setting(URI=None, STRICT=False):
        yield


def run(capsys, *argv):
    cli.main(list(argv))
    return capsys.readouterr().out.splitlines()


def test_list(capsys, tmp_path):
    lines = run(capsys, '-c', str(tmp_path / 'none.conf'), 'list', 'storage-pool-state')
    assert lines[0] == '%s\tinactive' % libvirt.VIR_STORAGE_POOL_INACTIVE
    assert '%s\trunning' % libvirt.VIR_STORAGE_POOL_RUNNING in lines


def test_decode(capsys, tmp_path):
    lines = run(capsys, '-c', str(tmp_path / 'none.conf'), 'decode', 'domain-state', '1', '0x5', '1000')
    assert lines == ['running', 'shutoff', 'DomainState(1000)']


def test_decode_strict(capsys, tmp_path, caplog):
    with pytest.raises(SystemExit) as exc_info:
        run(capsys, '-c', str(tmp_path / 'none.conf'), '--strict', 'decode', 'domain-state', '1000')
    assert exc_info.value.code == 1
    assert 'unknown DomainState value 1000' in caplog.text


def test_decode_out_of_range(capsys, tmp_path):
    with pytest.raises(SystemExit):
        run(capsys, '-c', str(tmp_path / 'none.conf'), 'decode', 'network-update-command', '-1')


def test_config_file(capsys, tmp_path):
    config = tmp_path / 'virsh-enum.conf'
    config.write_text('[DEFAULT]\nuri = test:///default\n\n[strict]\nstrict = yes\n')

    lines = run(capsys, '-c', str(config), 'pools')
    assert settings.URI == 'test:///default'
    assert not settings.STRICT
    assert lines == ['default-pool\trunning']

    run(capsys, '-c', str(config), '-s', 'strict', 'domains')
    assert settings.STRICT


def test_missing_section(capsys, tmp_path):
    with pytest.raises(SystemExit):
        run(capsys, '-c', str(tmp_path / 'none.conf'), '-s', 'nope', 'list', 'domain-state')


def test_uri_option(capsys, tmp_path):
    lines = run(capsys, '-c', str(tmp_path / 'none.conf'), '--uri', 'test:///default', 'domains')
    assert lines == ['test\trunning']


class BrokenConnection(object):
    def listAllDomains(self):
        raise libvirt.libvirtError('connection lost')


def test_libvirt_failure_exits(capsys, tmp_path, monkeypatch, caplog):
    monkeypatch.setattr(cli, 'LibVirtConnection', lambda uri: LibVirtConnection(conn=BrokenConnection()))
    with pytest.raises(SystemExit) as exc_info:
        run(capsys, '-c', str(tmp_path / 'none.conf'), 'domains')
    assert exc_info.value.code == 1
    assert 'Error listing domains' in caplog.text


class SecretsConnection(object):
    def listAllSecrets(self):
        return [Secret('b', 4242), Secret('a', libvirt.VIR_SECRET_USAGE_TYPE_CEPH)]


class Secret(object):
    def __init__(self, uuid, usage):
        self._uuid = uuid
        self._usage = usage

    def UUIDString(self):
        return self._uuid

    def usageType(self):
        return self._usage


def test_secrets(capsys, tmp_path, monkeypatch):
    monkeypatch.setattr(cli, 'LibVirtConnection', lambda uri: LibVirtConnection(conn=SecretsConnection()))
    lines = run(capsys, '-c', str(tmp_path / 'none.conf'), 'secrets')
    assert lines == ['a\tceph', 'b\tSecretUsageType(4242)']
