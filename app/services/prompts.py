"""
Prompt templates for every generative call.

All prompts are module-level constants so they can be tuned without
touching logic code. Builders only fill placeholders; missing optional
plan fields render as "N/A".

Public API
----------
build_section_prompt(section, plan)            -> str
build_market_analysis_prompt(plan)             -> str
build_growth_strategies_prompt(plan)           -> str
build_financial_forecast_prompt(plan)          -> str
build_compliance_items_prompt(business_type, state) -> str
build_legal_chat_prompt(message, context)      -> str
"""
from __future__ import annotations

from typing import Any, Dict, Mapping

from app.models.database_models import PlanSection
from app.utils.helpers import or_na


# ---------------------------------------------------------------------------
# Business plan sections (free text)
# ---------------------------------------------------------------------------

_EXECUTIVE_SUMMARY_PROMPT = """\
Create a professional executive summary for a business plan with the following details:
Business Name: {business_name}
Industry: {industry}
Business Idea: {business_idea}
Target Market: {target_market}

Focus on the key highlights, value proposition, and market opportunity. Keep it concise and compelling.\
"""

_MARKET_ANALYSIS_SECTION_PROMPT = """\
Provide a detailed market analysis for the following business:
Business Name: {business_name}
Industry: {industry}
Business Idea: {business_idea}
Target Market: {target_market}

Include:
1. Industry overview and trends
2. Target market size and demographics
3. Competitor analysis
4. Market opportunities and challenges
5. Competitive advantage\
"""

_OPERATIONS_PROMPT = """\
Create a comprehensive operations plan for:
Business Name: {business_name}
Industry: {industry}
Business Idea: {business_idea}

Include:
1. Location and facilities
2. Equipment and technology needs
3. Production/service delivery process
4. Supply chain management
5. Quality control measures
6. Staffing requirements\
"""

_MARKETING_PROMPT = """\
Develop a marketing strategy for:
Business Name: {business_name}
Industry: {industry}
Target Market: {target_market}

Include:
1. Marketing objectives
2. Brand positioning
3. Marketing channels and tactics
4. Pricing strategy
5. Sales process
6. Customer acquisition and retention strategies\
"""

_FINANCIAL_PROJECTIONS_PROMPT = """\
Create financial projections for:
Business Name: {business_name}
Industry: {industry}

Provide a high-level overview of:
1. Startup costs
2. Revenue projections (Year 1-3)
3. Operating expenses
4. Break-even analysis
5. Funding requirements
6. Key financial metrics

Note: These are estimates for planning purposes.\
"""

SECTION_PROMPTS: Dict[PlanSection, str] = {
    PlanSection.EXECUTIVE_SUMMARY: _EXECUTIVE_SUMMARY_PROMPT,
    PlanSection.MARKET_ANALYSIS: _MARKET_ANALYSIS_SECTION_PROMPT,
    PlanSection.OPERATIONS: _OPERATIONS_PROMPT,
    PlanSection.MARKETING: _MARKETING_PROMPT,
    PlanSection.FINANCIAL_PROJECTIONS: _FINANCIAL_PROJECTIONS_PROMPT,
}


# ---------------------------------------------------------------------------
# Market access reports (JSON)
# ---------------------------------------------------------------------------

_MARKET_ANALYSIS_PROMPT = """\
Analyze the following business plan and provide a detailed market analysis. \
Focus on market opportunities, competition, and growth potential in India.

Business Plan Details:
- Business Name: {business_name}
- Industry: {industry}
- Target Market: {target_market}
- Products/Services: {products_services}
- Competition: {competition}
- Market Size: {market_size}

Please provide analysis in the following JSON format:
{{
  "marketSize": {{
    "current": "estimated current market size in INR",
    "potential": "potential market size in 5 years",
    "growthRate": "expected annual growth rate"
  }},
  "competitiveLandscape": {{
    "directCompetitors": ["list of direct competitors"],
    "indirectCompetitors": ["list of indirect competitors"],
    "competitiveAdvantages": ["your competitive advantages"]
  }},
  "marketOpportunities": ["list of key market opportunities"],
  "marketThreats": ["list of potential threats"],
  "recommendations": ["specific recommendations for market entry and growth"]
}}

Ensure the response is a valid JSON object. Do not include any text outside the JSON structure.\
"""

_GROWTH_STRATEGIES_PROMPT = """\
Based on the following business plan, provide detailed market growth strategies and \
recommendations. Focus on practical, actionable steps for the Indian market.

Business Plan Details:
- Business Name: {business_name}
- Industry: {industry}
- Target Market: {target_market}
- Products/Services: {products_services}
- USP: {unique_value}
- Current Challenges: {challenges}

Please provide strategies in the following JSON format:
{{
  "shortTerm": {{
    "marketingStrategies": ["list of immediate marketing actions"],
    "salesStrategies": ["list of immediate sales actions"],
    "channelStrategies": ["list of distribution channels to focus on"],
    "estimatedCosts": {{
      "marketing": "estimated marketing budget in INR",
      "sales": "estimated sales budget in INR",
      "channels": "estimated channel development budget in INR"
    }},
    "expectedOutcomes": ["list of expected results in 3-6 months"]
  }},
  "longTerm": {{
    "expansionStrategies": ["list of market expansion strategies"],
    "productStrategies": ["list of product development strategies"],
    "partnershipStrategies": ["list of potential partnership opportunities"],
    "investmentRequired": {{
      "total": "estimated total investment needed in INR",
      "breakdown": {{
        "expansion": "expansion cost in INR",
        "product": "product development cost in INR",
        "partnerships": "partnership development cost in INR"
      }}
    }},
    "expectedOutcomes": ["list of expected results in 1-2 years"]
  }},
  "keyMetrics": ["list of KPIs to track"],
  "riskMitigation": [
    "risk statement 1",
    {{
      "risk": "specific risk description",
      "mitigation": "specific mitigation strategy"
    }}
  ]
}}

Important: For the "riskMitigation" array, you can either provide simple string items OR \
objects with "risk" and "mitigation" properties, but be consistent in your response.

Ensure the response is a valid JSON object. Do not include any text outside the JSON structure.\
"""


# ---------------------------------------------------------------------------
# Funding
# ---------------------------------------------------------------------------

_FINANCIAL_FORECAST_PROMPT = """\
Based on the following business plan details, generate a detailed financial forecast.
Format the response as a valid JSON object without any markdown formatting or additional text.

Business Details:
Name: {business_name}
Industry: {industry}
Target Market: {target_market}

Financial Information:
{financial_section}

Market Analysis:
{market_section}

Operations:
{operations_section}

Generate a JSON response with this exact structure:
{{
  "startupCosts": {{
    "totalAmount": number,
    "breakdown": {{
      "equipment": number,
      "licenses": number,
      "initialInventory": number,
      "marketing": number,
      "workingCapital": number,
      "others": number
    }}
  }},
  "monthlyProjections": {{
    "revenue": {{
      "amounts": number[],
      "sources": {{"productSales": number, "services": number, "other": number}}
    }},
    "expenses": {{
      "amounts": number[],
      "breakdown": {{
        "rawMaterials": number,
        "labor": number,
        "utilities": number,
        "rent": number,
        "marketing": number,
        "others": number
      }}
    }}
  }},
  "keyMetrics": {{
    "breakEvenPoint": {{"months": number, "amount": number}},
    "profitMargin": number,
    "roi": number,
    "paybackPeriod": number
  }},
  "fundingNeeds": {{
    "totalRequired": number,
    "recommendedSources": [
      {{"source": string, "amount": number, "type": string, "terms": string}}
    ]
  }}
}}

Important:
1. All amounts should be in Indian Rupees (INR)
2. Ensure the response is a valid JSON object
3. Do not include any explanatory text or markdown formatting
4. Base calculations on typical Indian market rates and conditions
5. Consider local costs and market standards for the specific industry\
"""


# ---------------------------------------------------------------------------
# Legal & compliance
# ---------------------------------------------------------------------------

_COMPLIANCE_ITEMS_PROMPT = """\
Generate 5-7 compliance requirements for a {business_type} business in {state}, India.
Please provide the details in the following JSON format:

[
  {{
    "title": "Requirement name",
    "description": "Brief description of the requirement",
    "category": "Category (e.g., Taxation, Registration, Labor Compliance, Industry-Specific, etc.)",
    "priority": "high/medium/low",
    "applicableBusinessTypes": ["{business_type}"],
    "applicableStates": ["{state}"],
    "dueDate": "YYYY-MM-DD (if applicable, otherwise null)",
    "link": "Official website URL for this requirement",
    "status": "active",
    "steps": [
      {{
        "order": 1,
        "description": "First step description",
        "estimatedTime": "Estimated time to complete (e.g., '1-2 days')"
      }}
    ],
    "fees": {{
      "amount": 0,
      "description": "Description of the fee (amount in INR, numeric, no currency symbol)"
    }},
    "helpfulLinks": [
      {{"title": "Link title", "url": "URL to helpful resource"}}
    ]
  }}
]

Focus on important legal and tax compliance requirements like:
1. Business registration (e.g., Shop and Establishment Act)
2. Tax registrations (GST, Income Tax, Professional Tax)
3. Labor law compliances (PF, ESI, etc.)
4. Industry-specific licenses for {business_type} businesses
5. Local municipal permits required in {state}

Make sure the applicableBusinessTypes array includes only "{business_type}" (not "All") and \
applicableStates includes only "{state}" (not "All") to ensure these items are specific to \
this business type and location.

For each item, provide accurate, realistic and actionable information relevant to India. \
Use real links to government portals where applicable.\
"""

_LEGAL_CHAT_PROMPT = """\
You are an AI Legal Assistant helping Indian business owners understand legal and compliance requirements.

Business Context:
- Type: {business_type}
- State: {state}
- Registration Status: {registration_status}
- Employee Count: {employee_count}
- Annual Revenue Range: {annual_revenue}
- Sector: {sector}

Please provide a detailed response to the following question, considering the business \
context above. Format your response using markdown for better readability.

User's Question: {message}

Remember to:
1. Be specific to Indian laws and regulations
2. Consider the business size and type
3. Provide actionable steps when applicable
4. Include relevant deadlines or timelines
5. Mention any financial implications
6. Format the response with proper markdown headings, lists, and emphasis
7. Include disclaimers when necessary\
"""


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

def _plan_fields(plan: Any) -> Dict[str, str]:
    return {
        "business_name": or_na(getattr(plan, "business_name", None)),
        "industry": or_na(getattr(plan, "industry", None)),
        "business_idea": or_na(getattr(plan, "business_idea", None)),
        "target_market": or_na(getattr(plan, "target_market", None)),
        "products_services": or_na(getattr(plan, "products_services", None)),
        "competition": or_na(getattr(plan, "competition", None)),
        "market_size": or_na(getattr(plan, "market_size", None)),
        "unique_value": or_na(getattr(plan, "unique_value", None)),
        "challenges": or_na(getattr(plan, "challenges", None)),
    }


def _section_content(plan: Any, section: PlanSection) -> str:
    entry = (getattr(plan, "sections", None) or {}).get(section.value) or {}
    return or_na(entry.get("content"))


def build_section_prompt(section: PlanSection, plan: Any) -> str:
    """Prompt for one free-text business plan section."""
    return SECTION_PROMPTS[PlanSection(section)].format(**_plan_fields(plan))


def build_market_analysis_prompt(plan: Any) -> str:
    return _MARKET_ANALYSIS_PROMPT.format(**_plan_fields(plan))


def build_growth_strategies_prompt(plan: Any) -> str:
    return _GROWTH_STRATEGIES_PROMPT.format(**_plan_fields(plan))


def build_financial_forecast_prompt(plan: Any) -> str:
    """Forecast prompt; embeds the plan's financial, market and operations sections."""
    return _FINANCIAL_FORECAST_PROMPT.format(
        financial_section=_section_content(plan, PlanSection.FINANCIAL_PROJECTIONS),
        market_section=_section_content(plan, PlanSection.MARKET_ANALYSIS),
        operations_section=_section_content(plan, PlanSection.OPERATIONS),
        **_plan_fields(plan),
    )


def build_compliance_items_prompt(business_type: str, state: str) -> str:
    return _COMPLIANCE_ITEMS_PROMPT.format(business_type=business_type, state=state)


def build_legal_chat_prompt(message: str, context: Mapping[str, Any]) -> str:
    """
    Markdown-answer prompt for the legal assistant.

    *context* carries the business type and state from the request plus
    profile fields; anything absent falls back to a neutral default.
    """
    return _LEGAL_CHAT_PROMPT.format(
        business_type=or_na(context.get("type")),
        state=or_na(context.get("state")),
        registration_status=context.get("registrationStatus") or "unregistered",
        employee_count=context.get("employeeCount") or 0,
        annual_revenue=context.get("annualRevenue") or "0-5L",
        sector=context.get("sector") or "Other",
        message=message,
    )
