"""Unit tests for prompt builders."""
from types import SimpleNamespace

from app.models.database_models import PlanSection
from app.services import prompts


def _plan(**overrides):
    fields = dict(
        business_name="Sakhi Handlooms",
        industry="Retail",
        business_idea="Handwoven sarees",
        target_market="Urban shoppers",
        products_services=None,
        competition="",
        market_size=None,
        unique_value=None,
        challenges=None,
        sections={},
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


def test_every_section_has_a_prompt():
    for section in PlanSection:
        text = prompts.build_section_prompt(section, _plan())
        assert "Sakhi Handlooms" in text


def test_missing_fields_render_as_na():
    text = prompts.build_market_analysis_prompt(_plan())
    assert "- Products/Services: N/A" in text
    assert "- Competition: N/A" in text
    assert "- Market Size: N/A" in text


def test_market_analysis_prompt_keeps_json_template():
    text = prompts.build_market_analysis_prompt(_plan())
    assert '"marketSize": {' in text
    assert "{{" not in text


def test_forecast_prompt_embeds_plan_sections():
    plan = _plan(
        sections={
            "financialProjections": {"content": "Revenue of 10 lakh in year one"},
            "operations": {"content": "Two looms, five weavers"},
        }
    )
    text = prompts.build_financial_forecast_prompt(plan)
    assert "Revenue of 10 lakh in year one" in text
    assert "Two looms, five weavers" in text


def test_compliance_prompt_names_type_and_state():
    text = prompts.build_compliance_items_prompt("Food Processing", "Kerala")
    assert "Food Processing" in text
    assert "Kerala" in text


def test_legal_chat_prompt_defaults():
    text = prompts.build_legal_chat_prompt("Do I need GST?", {"type": "Retail"})
    assert "- Type: Retail" in text
    assert "- State: N/A" in text
    assert "- Registration Status: unregistered" in text
    assert "- Employee Count: 0" in text
    assert "- Annual Revenue Range: 0-5L" in text
    assert "- Sector: Other" in text
    assert "User's Question: Do I need GST?" in text


def test_forecast_prompt_marks_missing_sections_na():
    plan = _plan(sections={"operations": {"content": "Two looms, five weavers"}})
    text = prompts.build_financial_forecast_prompt(plan)
    assert "Financial Information:\nN/A\n" in text
    assert "Market Analysis:\nN/A\n" in text
    assert "Operations:\nTwo looms, five weavers\n" in text
