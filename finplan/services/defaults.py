"""Built-in strategy set seeded into a new catalog."""
from typing import List

from finplan.schemas.strategy import Strategy

DEFAULT_STRATEGIES = [
    {
        "id": "priority-actions",
        "title": "Priority Actions",
        "description": "Summary of the first steps to take after the planning meeting",
        "category": "Planning",
        "section": "recommendations",
        "content": "Within the next {{timeframe}}, focus on the actions below in the order they appear in this plan.",
        "inputFields": [
            {
                "id": "timeframe",
                "label": "Timeframe for first actions",
                "type": "select",
                "options": ["30 days", "90 days", "6 months", "12 months"],
                "defaultValue": "90 days",
            },
        ],
    },
    {
        "id": "emergency-fund",
        "title": "Emergency Fund Strategy",
        "description": "Build and maintain 3-6 months of expenses in liquid savings",
        "category": "Savings",
        "section": "buildNetWorth",
        "content": (
            "Keep an emergency fund of {{months}} months of living expenses in a high-interest "
            "savings account or a Tax-Free Savings Account (TFSA), separate from other savings goals."
        ),
        "inputFields": [
            {"id": "months", "label": "Months of expenses", "type": "number", "defaultValue": 6},
        ],
    },
    {
        "id": "debt-reduction",
        "title": "Debt Reduction Plan",
        "description": "Systematic approach to eliminate high-interest debt",
        "category": "Debt Management",
        "section": "buildNetWorth",
        "content": (
            "Pay down debt with the {{method}} method while keeping minimum payments on every "
            "account. Direct an extra {{extraPayment}} per month to the targeted balance."
        ),
        "inputFields": [
            {
                "id": "method",
                "label": "Repayment method",
                "type": "select",
                "options": ["avalanche (highest interest first)", "snowball (smallest balance first)"],
                "defaultValue": "avalanche (highest interest first)",
            },
            {"id": "extraPayment", "label": "Extra monthly payment", "type": "text", "placeholder": "$250"},
        ],
    },
    {
        "id": "rrsp-optimization",
        "title": "RRSP Optimization Strategy",
        "description": "Maximize RRSP contributions and employer matching",
        "category": "Retirement",
        "section": "buildNetWorth",
        "content": (
            "Contribute to your Registered Retirement Savings Plan (RRSP) for an immediate tax "
            "deduction and tax-deferred growth. Capture the full employer match before making "
            "additional contributions."
        ),
        "inputFields": [],
    },
    {
        "id": "tfsa-maximization",
        "title": "TFSA Maximization Strategy",
        "description": "Fully utilize Tax-Free Savings Account room",
        "category": "Savings",
        "section": "buildNetWorth",
        "content": (
            "Use your available TFSA room each year. Growth and withdrawals are tax-free, and "
            "withdrawn amounts are added back to your room the following January."
        ),
        "inputFields": [],
    },
    {
        "id": "investment-portfolio-canadian",
        "title": "Canadian Diversified Investment Portfolio",
        "description": "Build portfolio with Canadian and international exposure",
        "category": "Investing",
        "section": "buildNetWorth",
        "content": (
            "Hold a diversified mix of Canadian equity, international developed and emerging "
            "markets, and bonds, with about {{canadianEquityPercent}}% in Canadian equity. Prefer "
            "Canadian-listed ETFs in taxable accounts to limit foreign withholding tax."
        ),
        "inputFields": [
            {
                "id": "canadianEquityPercent",
                "label": "Canadian equity share (%)",
                "type": "number",
                "defaultValue": 30,
            },
        ],
    },
    {
        "id": "qpp-cpp-optimization",
        "title": "QPP/CPP Optimization Strategy",
        "description": "Optimize Quebec and Canada Pension Plan benefits",
        "category": "Retirement",
        "section": "buildNetWorth",
        "content": (
            "Plan to start QPP/CPP benefits at age {{claimAge}}. Each year of delay past 65 raises "
            "the pension, up to 42% more at 70; weigh this against OAS and personal savings."
        ),
        "inputFields": [
            {
                "id": "claimAge",
                "label": "Planned claiming age",
                "type": "select",
                "options": ["60", "65", "70"],
                "defaultValue": "65",
            },
        ],
    },
    {
        "id": "first-time-homebuyer",
        "title": "First-Time Home Buyer Strategy",
        "description": "Leverage Canadian programs for home ownership",
        "category": "Real Estate",
        "section": "buildNetWorth",
        "content": (
            "Plan a down payment of {{downPayment}} toward the purchase. The Home Buyers' Plan "
            "lets you withdraw from your RRSP for a first home; budget for land transfer tax, "
            "legal fees and an inspection."
        ),
        "inputFields": [
            {"id": "downPayment", "label": "Target down payment", "type": "text", "required": True},
        ],
    },
    {
        "id": "tax-efficiency-assessment",
        "title": "Tax Efficiency Assessment",
        "description": "Evaluate non-registered account tax efficiency",
        "category": "Tax Planning",
        "section": "implementingTaxStrategies",
        "content": (
            "Review non-registered investment accounts for opportunities created by the dividend "
            "tax credit and capital gains treatment."
        ),
        "inputFields": [
            {
                "id": "significantNonRegistered",
                "label": "Is there a significant non-registered account?",
                "type": "toggle",
                "defaultValue": False,
                "conditionalText": {
                    "whenTrue": (
                        "Hold Canadian eligible dividends and growth investments in the "
                        "non-registered account and interest-bearing investments in registered accounts."
                    ),
                },
            },
        ],
    },
    {
        "id": "tax-loss-harvesting",
        "title": "Tax Loss Harvesting",
        "description": "Offset capital gains with realized investment losses",
        "category": "Tax Planning",
        "section": "implementingTaxStrategies",
        "content": (
            "Realize investment losses to offset capital gains, observing the 30-day superficial "
            "loss rule. Net capital losses can be carried back three years or forward indefinitely."
        ),
        "inputFields": [],
    },
    {
        "id": "quebec-tax-optimization",
        "title": "Quebec Tax Optimization Strategy",
        "description": "Minimize combined federal and Quebec provincial tax burden",
        "category": "Tax Planning",
        "section": "implementingTaxStrategies",
        "content": (
            "File separate federal and Quebec returns and plan deductions against the combined "
            "marginal rate. Claim Quebec credits for childcare, medical expenses and donations, "
            "and split income where the rules allow."
        ),
        "inputFields": [],
    },
    {
        "id": "rrif-withdrawal-strategy",
        "title": "RRIF Withdrawal Strategy",
        "description": "Optimize RRIF withdrawals for tax efficiency",
        "category": "Retirement",
        "section": "implementingTaxStrategies",
        "content": (
            "Plan RRIF withdrawals, mandatory from age 71, with pension income splitting between "
            "spouses. Take voluntary withdrawals in lower-income years to smooth taxable income "
            "and stay below the OAS clawback threshold."
        ),
        "inputFields": [],
    },
    {
        "id": "capital-gains-optimization",
        "title": "Capital Gains Tax Strategy",
        "description": "Optimize capital gains realization and lifetime exemption",
        "category": "Tax Planning",
        "section": "implementingTaxStrategies",
        "content": (
            "Time the realization of capital gains across tax years and use the lifetime capital "
            "gains exemption on qualified small business shares and farm or fishing property."
        ),
        "inputFields": [],
    },
    {
        "id": "insurance-review",
        "title": "Insurance Coverage Review",
        "description": "Ensure adequate life, disability and critical illness protection",
        "category": "Insurance",
        "section": "protectingWhatMatters",
        "content": (
            "Review life insurance needs, commonly {{incomeMultiple}} times annual income, covering "
            "mortgage, income replacement and final expenses. Check disability coverage against "
            "employer benefits."
        ),
        "inputFields": [
            {"id": "incomeMultiple", "label": "Income multiple", "type": "number", "defaultValue": 10},
            {
                "id": "hasCriticalIllness",
                "label": "Does the client hold critical illness coverage?",
                "type": "toggle",
                "defaultValue": False,
                "conditionalText": {
                    "whenFalse": "Consider critical illness insurance to complement provincial healthcare coverage.",
                },
            },
        ],
    },
    {
        "id": "oas-optimization",
        "title": "Old Age Security Optimization",
        "description": "Maximize OAS benefits and minimize clawbacks",
        "category": "Retirement",
        "section": "protectingWhatMatters",
        "content": (
            "Keep net income below the OAS recovery tax threshold through income splitting, "
            "timed RRSP and RRIF withdrawals and planned capital gains. Check eligibility for "
            "the Guaranteed Income Supplement."
        ),
        "inputFields": [],
    },
    {
        "id": "estate-executor-review",
        "title": "Estate Executor Review",
        "description": "Assess executor capability for estate management",
        "category": "Estate Planning",
        "section": "leavingALegacy",
        "content": "Confirm that the executor named in your will can administer the estate.",
        "inputFields": [
            {
                "id": "executorCapable",
                "label": "Is the executor able to handle the estate?",
                "type": "toggle",
                "defaultValue": True,
                "conditionalText": {
                    "whenFalse": "Consider appointing a trust company or a professional executor.",
                },
            },
        ],
    },
    {
        "id": "estate-planning-quebec",
        "title": "Quebec Estate Planning Essentials",
        "description": "Create estate planning documents under Quebec civil law",
        "category": "Estate Planning",
        "section": "leavingALegacy",
        "content": (
            "Prepare a will that meets Civil Code of Quebec requirements, preferably a notarial "
            "will, and a protection mandate in case of incapacity. Review beneficiary designations "
            "on RRSPs, RRIFs, TFSAs and insurance policies."
        ),
        "inputFields": [],
    },
    {
        "id": "testamentary-trust-analysis",
        "title": "Testamentary Trust Analysis",
        "description": "Determine if a testamentary trust is appropriate under Quebec law",
        "category": "Estate Planning",
        "section": "leavingALegacy",
        "content": "Assess whether a testamentary trust suits your beneficiaries under the Civil Code of Quebec.",
        "inputFields": [
            {
                "id": "testamentaryTrustRelevant",
                "label": "Is a testamentary trust relevant?",
                "type": "toggle",
                "defaultValue": False,
                "conditionalText": {
                    "whenTrue": (
                        "A testamentary trust can offer tax advantages and asset protection, "
                        "particularly for minor children or beneficiaries who need financial guidance."
                    ),
                },
            },
        ],
    },
    {
        "id": "resp-education-funding",
        "title": "RESP Education Funding Plan",
        "description": "Save for children's education with a Registered Education Savings Plan",
        "category": "Education",
        "section": "leavingALegacy",
        "content": (
            "Contribute {{annualContribution}} per year to an RESP to collect the 20% Canada "
            "Education Savings Grant on the first $2,500 contributed annually."
        ),
        "inputFields": [
            {"id": "annualContribution", "label": "Annual contribution", "type": "number", "defaultValue": 2500},
        ],
    },
    {
        "id": "charitable-giving",
        "title": "Charitable Giving Strategy",
        "description": "Optimize charitable donations for tax efficiency",
        "category": "Tax Planning",
        "section": "leavingALegacy",
        "content": (
            "Donate appreciated securities in kind to eliminate the capital gain and claim the "
            "donation credit on the full market value."
        ),
        "inputFields": [],
    },
]


def default_strategies() -> List[Strategy]:
    """Fresh Strategy objects for the built-in set."""
    return [Strategy.model_validate({**data, "isCustom": False}) for data in DEFAULT_STRATEGIES]
