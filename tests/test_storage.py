"""
Storage and Model Tests
"""
import io
import os

import pytest
from werkzeug.datastructures import FileStorage

from docupper import storage
from docupper.models import UploadedFile, detect_extension


def _file(name, data=b'payload'):
    return FileStorage(stream=io.BytesIO(data), filename=name)


class TestUploadedFile:
    """Test upload naming"""

    def test_output_name(self):
        upload = UploadedFile('Quarterly Report.docx', '/tmp/x.docx', '.docx')
        assert upload.base_name == 'Quarterly Report'
        assert upload.output_name == 'Quarterly Report_UPPER.docx'

    def test_output_name_strips_client_directories(self):
        upload = UploadedFile('C:\\Users\\me\\deck.pptx', '/tmp/x.pptx', '.pptx')
        assert upload.output_name == 'deck_UPPER.pptx'

    def test_output_name_keeps_lowercased_extension(self):
        upload = UploadedFile('LOUD.PDF', '/tmp/x.pdf', detect_extension('LOUD.PDF'))
        assert upload.output_name == 'LOUD_UPPER.pdf'

    @pytest.mark.parametrize('name,ext', [
        ('a.DOCX', '.docx'),
        ('archive.tar.pdf', '.pdf'),
        ('noext', ''),
        ('', ''),
    ])
    def test_detect_extension(self, name, ext):
        assert detect_extension(name) == ext


class TestStagedConversion:
    """Test per-request storage lifecycle"""

    def test_paths_are_namespaced(self, tmp_path):
        uploads, outputs = str(tmp_path / 'up'), str(tmp_path / 'out')
        with storage.staged_conversion(_file('same.docx'), uploads, outputs) as first:
            with storage.staged_conversion(_file('same.docx'), uploads, outputs) as second:
                assert first.request_id != second.request_id
                assert first.upload.path != second.upload.path
                assert first.output_path != second.output_path
                assert os.path.basename(first.output_path) == 'same_UPPER.docx'
                assert os.path.exists(first.upload.path)

    def test_cleans_up_on_success(self, tmp_path):
        uploads, outputs = str(tmp_path / 'up'), str(tmp_path / 'out')
        with storage.staged_conversion(_file('doc.pdf'), uploads, outputs) as job:
            with open(job.output_path, 'wb') as f:
                f.write(b'result')
        assert os.listdir(uploads) == []
        assert os.listdir(outputs) == []

    def test_cleans_up_on_error(self, tmp_path):
        uploads, outputs = str(tmp_path / 'up'), str(tmp_path / 'out')
        with pytest.raises(RuntimeError):
            with storage.staged_conversion(_file('doc.pdf'), uploads, outputs, retain_output=True) as job:
                with open(job.output_path, 'wb') as f:
                    f.write(b'partial')
                raise RuntimeError('boom')
        assert os.listdir(uploads) == []
        assert os.listdir(outputs) == []

    def test_retains_output(self, tmp_path):
        uploads, outputs = str(tmp_path / 'up'), str(tmp_path / 'out')
        with storage.staged_conversion(_file('doc.pdf'), uploads, outputs, retain_output=True) as job:
            with open(job.output_path, 'wb') as f:
                f.write(b'result')
        assert os.listdir(uploads) == []
        assert os.path.exists(job.output_path)


class TestRemoval:
    """Test quiet deletion helpers"""

    def test_remove_missing_file(self, tmp_path):
        storage.remove_file(str(tmp_path / 'gone'))
        storage.remove_file(None)

    def test_discard_missing_output(self, tmp_path):
        storage.discard_output(str(tmp_path / 'gone' / 'x.pdf'))
        storage.discard_output(None)


class TestPurgeOutputs:
    """Test retained output eviction"""

    def test_purges_only_expired(self, tmp_path):
        outputs = tmp_path / 'out'
        old = outputs / 'old'
        fresh = outputs / 'fresh'
        old.mkdir(parents=True)
        fresh.mkdir()
        (old / 'a_UPPER.pdf').write_bytes(b'x')
        (fresh / 'b_UPPER.pdf').write_bytes(b'y')
        now = os.path.getmtime(str(fresh))
        os.utime(str(old), (now - 7200, now - 7200))

        removed = storage.purge_outputs(str(outputs), 3600, now=now)
        assert removed == 1
        assert sorted(os.listdir(str(outputs))) == ['fresh']

    def test_missing_folder(self, tmp_path):
        assert storage.purge_outputs(str(tmp_path / 'nothing'), 0) == 0

    def test_cli_command(self, app):
        folder = os.path.join(app.config['OUTPUT_FOLDER'], 'abc')
        os.makedirs(folder)
        result = app.test_cli_runner().invoke(args=['purge-outputs', '--max-age', '0'])
        assert result.exit_code == 0
        assert 'Removed 1 output folder(s)' in result.output
        assert not os.path.exists(folder)
