from io import BytesIO

import docx
import pytest

from jobmatch.errors import GatewayError, ParseError, ValidationError
from jobmatch.models.ai_models import CvOptimizationRequest
from jobmatch.services.cv_service import CvService

from tests.fakes import FakeGateway

CV_JSON = """
{
  "Name": "Jane Doe",
  "EMAIL": "jane@example.com",
  "skills": ["Python", "SQL"],
  "Experience": ["Acme 2020-2024", "Globex 2018-2020"],
  "certifications": "AWS SAA"
}
"""


@pytest.mark.parametrize("text", ["", "   \n\t"])
async def test_empty_text_is_rejected(text):
    gateway = FakeGateway()
    with pytest.raises(ValidationError):
        await CvService(gateway=gateway).extract_cv_details(text)
    assert gateway.calls == 0


async def test_extracts_fields_case_insensitively():
    gateway = FakeGateway([CV_JSON])

    parsed = await CvService(gateway=gateway).extract_cv_details("Jane Doe, Python dev")

    assert parsed.name == "Jane Doe"
    assert parsed.email == "jane@example.com"
    assert parsed.skills == ["Python", "SQL"]
    assert parsed.experience == "Acme 2020-2024\nGlobex 2018-2020"
    assert parsed.certifications == ["AWS SAA"]
    assert parsed.phone == ""
    assert "Jane Doe, Python dev" in gateway.requests[0].messages[1].content


async def test_malformed_output_raises_parse_error():
    with pytest.raises(ParseError):
        await CvService(gateway=FakeGateway(["I could not parse this resume."])).extract_cv_details("text")


async def test_uploaded_docx_is_parsed():
    document = docx.Document()
    document.add_paragraph("Jane Doe")
    document.add_paragraph("Python developer")
    buf = BytesIO()
    document.save(buf)
    gateway = FakeGateway([CV_JSON])

    parsed = await CvService(gateway=gateway).extract_cv_details_from_document(
        file_bytes=buf.getvalue(), file_name="jane.docx"
    )

    assert parsed.name == "Jane Doe"
    assert "Python developer" in gateway.requests[0].messages[1].content


async def test_unsupported_upload_is_rejected():
    gateway = FakeGateway()
    with pytest.raises(ValidationError):
        await CvService(gateway=gateway).extract_cv_details_from_document(file_bytes=b"x", file_name="cv.txt")
    assert gateway.calls == 0


async def test_optimize_returns_resume_and_missing_skills():
    gateway = FakeGateway(['{"optimizedResume": "Better resume", "MISSING_SKILLS": ["Kubernetes"]}'])
    request = CvOptimizationRequest(resume_text="Old resume", job_title="SRE", seniority_level="Senior")

    result = await CvService(gateway=gateway).optimize_cv(request)

    assert result.optimized_resume == "Better resume"
    assert result.missing_skills == ["Kubernetes"]
    prompt = gateway.requests[0].messages[1].content
    assert "Senior position in General" in prompt
    assert "relevant to SRE" in prompt


async def test_optimize_requires_resume_text():
    with pytest.raises(ValidationError):
        await CvService(gateway=FakeGateway()).optimize_cv(CvOptimizationRequest(resume_text=" "))


async def test_optimize_propagates_gateway_error():
    gateway = FakeGateway([GatewayError("unauthorized", status_code=401)])
    with pytest.raises(GatewayError):
        await CvService(gateway=gateway).optimize_cv(CvOptimizationRequest(resume_text="Old resume"))
