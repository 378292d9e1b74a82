import json

from first_care_quote.service.calculator import CalculatorState

state = CalculatorState()
state.update(
    age=41,
    nationality="British",
    country_of_residence="Thailand",
    coverage_tier="IP+OP",
    payment_frequency="semi-annual",
)

view = state.view()
print("Warnings:", view.warnings)
print(f"Premium: ${view.breakdown.premium} {view.breakdown.period_label}")
print(json.dumps(view.to_dict(), indent=2))
