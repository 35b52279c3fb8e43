"""
Test Configuration and Fixtures
"""
import io

import docx
import pytest
from pptx import Presentation
from pptx.util import Inches
from reportlab.pdfgen import canvas

from docupper import create_app


@pytest.fixture(scope='function')
def app(tmp_path):
    """Create application for testing with private storage folders"""
    app = create_app('testing', {
        'UPLOAD_FOLDER': str(tmp_path / 'uploads'),
        'OUTPUT_FOLDER': str(tmp_path / 'outputs'),
    })
    yield app


@pytest.fixture(scope='function')
def client(app):
    """Create test client"""
    return app.test_client()


@pytest.fixture
def make_docx(tmp_path):
    """Build a DOCX with one paragraph per string"""
    def _make(paragraphs, name='input.docx'):
        document = docx.Document()
        for text in paragraphs:
            document.add_paragraph(text)
        path = tmp_path / name
        document.save(str(path))
        return path
    return _make


@pytest.fixture
def make_pdf(tmp_path):
    """Build a one-page PDF with one drawn line per string"""
    def _make(lines, name='input.pdf'):
        path = tmp_path / name
        pdf = canvas.Canvas(str(path), pagesize=(600, 800))
        pdf.setFont('Helvetica', 12)
        y = 750
        for line in lines:
            pdf.drawString(50, y, line)
            y -= 20
        pdf.showPage()
        pdf.save()
        return path
    return _make


@pytest.fixture
def make_pptx(tmp_path):
    """Build a PPTX; each slide is a list of text boxes, each box a list of runs"""
    def _make(slides, name='input.pptx'):
        prs = Presentation()
        for boxes in slides:
            slide = prs.slides.add_slide(prs.slide_layouts[6])
            top = 1
            for runs in boxes:
                frame = slide.shapes.add_textbox(Inches(1), Inches(top), Inches(6), Inches(1)).text_frame
                paragraph = frame.paragraphs[0]
                for text in runs:
                    paragraph.add_run().text = text
                top += 1.5
        path = tmp_path / name
        prs.save(str(path))
        return path
    return _make


@pytest.fixture
def upload(client):
    """POST a file to /upload as multipart form data"""
    def _upload(data, filename):
        return client.post(
            '/upload',
            data={'file': (io.BytesIO(data), filename)},
            content_type='multipart/form-data',
        )
    return _upload
