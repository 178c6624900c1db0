"""
Property-based testing using Hypothesis.

This package contains property tests that verify mathematical invariants
hold across randomly generated inputs.

Modules:
    test_option_properties: Black-Scholes invariants (bounds, parity, monotonicity)
    test_payoff_properties: Payoff invariants (non-negativity, knock-out)
    test_mc_properties: Simulation engine and statistics invariants
    test_input_properties: Parameter acquisition always yields valid inputs
"""
