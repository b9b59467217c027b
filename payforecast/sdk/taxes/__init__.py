"""taxes - Statutory deduction calculations.

Scope:
- Tax schema loading and validation (versioned YAML in tax_schemas/)
- Social insurance: health, pension, employment insurance
- Progressive income tax and flat resident tax

Constraints:
- Pure calculation - no scenario persistence, no I/O outside rules.py
- Schemas are loaded once and treated as immutable

Modules:
- schemas: TaxSchema pydantic models
- rules: Tax schema loading (load_tax_schema, resolve_tax_schema)
- social_insurance: Standard remuneration banding and contributions
- income_tax: Bracket lookup, income tax, resident tax

Usage:
    from payforecast.sdk.taxes import load_tax_schema, calc_social_insurance

    schema = load_tax_schema("2024")
    insurance = calc_social_insurance(4_200_000, schema)
"""

from .schemas import TaxSchema, IncomeTaxRate

from .rules import (
    TaxSchemaNotFoundError,
    get_available_versions,
    load_tax_schema,
    load_tax_schema_file,
    resolve_tax_schema,
)

from .social_insurance import (
    SocialInsurance,
    calc_social_insurance,
    calc_standard_remuneration,
)

from .income_tax import (
    IncomeTaxes,
    calc_income_deductions,
    calc_income_taxes,
    find_tax_bracket,
)

__all__ = [
    # Schemas
    "TaxSchema",
    "IncomeTaxRate",
    # Loading
    "TaxSchemaNotFoundError",
    "get_available_versions",
    "load_tax_schema",
    "load_tax_schema_file",
    "resolve_tax_schema",
    # Social insurance
    "SocialInsurance",
    "calc_social_insurance",
    "calc_standard_remuneration",
    # Income tax
    "IncomeTaxes",
    "calc_income_deductions",
    "calc_income_taxes",
    "find_tax_bracket",
]
