"""Validate buffer recipes against worked examples and chemical invariants."""

import math

import numpy as np
import pytest

from bufferprep.chemistry.families import BUFFER_FAMILIES
from bufferprep.engine import (
    FORMULAS,
    calculate_acetate_buffer,
    calculate_carbonate_buffer,
    calculate_citrate_buffer,
    calculate_phosphate_buffer,
    calculate_tris_buffer,
    compute,
    compute_many,
    compute_request,
)
from bufferprep.schema import (
    CONJUGATE_BASE,
    WEAK_ACID,
    BufferFormulaError,
    BufferRequest,
    BufferResult,
    BufferType,
)

PKA_25C = {
    "phosphate": 7.20,
    "tris": 8.06,
    "citrate": 4.76,
    "acetate": 4.76,
    "carbonate": 10.33,
}


class TestWorkedExamples:
    """Recipes quoted in the calculator documentation."""

    def test_phosphate_at_pka(self, one_litre_decimolar):
        result = compute("phosphate", 7.2, temperature=25.0, **one_litre_decimolar)

        assert isinstance(result, BufferResult)
        base, acid = result.components
        assert base.name.startswith("Na2HPO4")
        assert base.amount == "7.0980"
        assert base.unit == "g"
        assert acid.name.startswith("NaH2PO4")
        assert acid.amount == "5.9990"
        assert acid.unit == "g"
        assert result.final_volume == 1.0
        assert result.volume_unit == "L"
        assert result.warnings == ()

    def test_acetate_at_pka(self, one_litre_decimolar):
        result = compute("acetate", 4.76, **one_litre_decimolar)

        acid, base = result.components
        assert acid.name == "Glacial acetic acid"
        assert acid.amount == "2.8736"
        assert acid.unit == "mL"
        assert base.name == "Sodium acetate (anhydrous)"
        assert base.amount == "4.1015"
        assert base.unit == "g"

    def test_to_dict_matches_original_shape(self, one_litre_decimolar):
        result = compute("phosphate", 7.2, **one_litre_decimolar)
        payload = result.to_dict()

        assert set(payload) == {"components", "finalVolume", "volumeUnit", "notes"}
        assert payload["components"][0] == {
            "name": "Na2HPO4 (sodium phosphate dibasic)",
            "amount": "7.0980",
            "unit": "g",
        }
        assert payload["finalVolume"] == 1.0
        assert payload["volumeUnit"] == "L"


class TestChemicalInvariants:
    @pytest.mark.parametrize("buffer_type", list(PKA_25C))
    def test_equal_split_at_pka(self, buffer_type):
        pka = PKA_25C[buffer_type]
        result = compute(buffer_type, pka, volume=0.5, concentration=0.2, temperature=25.0)

        base = result.component(CONJUGATE_BASE)
        acid = result.component(WEAK_ACID)
        assert math.isclose(result.pka, pka)
        assert math.isclose(base.moles, 0.05, abs_tol=1e-12)
        assert math.isclose(acid.moles, 0.05, abs_tol=1e-12)

    @pytest.mark.parametrize("buffer_type", ["phosphate", "citrate", "carbonate"])
    @pytest.mark.parametrize("offset", [-0.9, -0.3, 0.0, 0.4, 0.9])
    def test_moles_are_conserved(self, buffer_type, offset):
        ph = PKA_25C[buffer_type] + offset
        result = compute(buffer_type, ph, volume=2.5, concentration=0.05)

        total = sum(comp.moles for comp in result.components)
        assert math.isclose(total, 0.05 * 2.5, abs_tol=1e-9)

    @pytest.mark.parametrize("buffer_type", list(PKA_25C))
    def test_base_fraction_increases_with_ph(self, buffer_type):
        pka = PKA_25C[buffer_type]
        fractions = []
        for ph in np.linspace(pka - 0.9, pka + 0.9, 10):
            result = compute(buffer_type, float(ph), volume=1.0, concentration=0.1)
            fractions.append(result.component(CONJUGATE_BASE).moles / 0.1)

        assert np.all(np.diff(fractions) > 0)
        assert np.all(np.diff(1.0 - np.asarray(fractions)) < 0)

    def test_component_order(self):
        for buffer_type in ("phosphate", "tris", "citrate", "carbonate"):
            result = compute(buffer_type, PKA_25C[buffer_type], 1.0, 0.1)
            assert [c.role for c in result.components] == [CONJUGATE_BASE, WEAK_ACID]

        result = compute("acetate", 4.76, 1.0, 0.1)
        assert [c.role for c in result.components] == [WEAK_ACID, CONJUGATE_BASE]

    def test_amounts_always_have_four_decimals(self):
        for volume, conc in [(0.001, 0.001), (1.0, 0.1), (50.0, 1.5)]:
            for buffer_type in PKA_25C:
                result = compute(buffer_type, PKA_25C[buffer_type] + 0.3, volume, conc)
                for comp in result.components:
                    whole, frac = comp.amount.split(".")
                    assert len(frac) == 4


class TestTrisTemperature:
    def test_equal_split_at_25c(self):
        result = compute("tris", 8.06, volume=1.0, concentration=0.1, temperature=25.0)
        base = result.component(CONJUGATE_BASE)
        acid = result.component(WEAK_ACID)
        assert math.isclose(base.moles, acid.moles)

    def test_warmer_solution_shifts_toward_base(self):
        result = compute("tris", 8.06, volume=1.0, concentration=0.1, temperature=35.0)
        base = result.component(CONJUGATE_BASE)
        acid = result.component(WEAK_ACID)
        assert math.isclose(result.pka, 7.76)
        assert base.moles > acid.moles
        assert math.isclose(base.moles / acid.moles, 10 ** 0.3)

    def test_other_families_ignore_temperature(self):
        cold = compute("phosphate", 7.0, 1.0, 0.1, temperature=4.0)
        warm = compute("phosphate", 7.0, 1.0, 0.1, temperature=37.0)
        assert cold.components == warm.components
        assert cold.pka == warm.pka == 7.2


class TestDispatch:
    def test_every_buffer_type_has_a_formula(self):
        assert set(FORMULAS) == set(BufferType)
        assert set(BUFFER_FAMILIES) == set(BufferType)

    @pytest.mark.parametrize(
        "buffer_type, formula",
        [
            ("phosphate", calculate_phosphate_buffer),
            ("tris", calculate_tris_buffer),
            ("citrate", calculate_citrate_buffer),
            ("acetate", calculate_acetate_buffer),
            ("carbonate", calculate_carbonate_buffer),
        ],
    )
    def test_compute_matches_direct_formula(self, buffer_type, formula):
        ph = PKA_25C[buffer_type] + 0.2
        assert compute(buffer_type, ph, 1.0, 0.1, 30.0) == formula(ph, 1.0, 0.1, 30.0)

    def test_unknown_buffer_type_returns_error(self):
        outcome = compute("unknown", 7.0, 1.0, 0.1, 25.0)

        assert isinstance(outcome, BufferFormulaError)
        assert not outcome.ok
        assert outcome.error == "Invalid buffer type"
        assert outcome.parameter == "buffer_type"
        assert outcome.to_dict() == {"error": "Invalid buffer type"}
        assert not hasattr(outcome, "components")

    def test_unknown_buffer_type_ignores_validation_flag(self):
        outcome = compute("hepes", 7.5, 1.0, 0.1, validate=False)
        assert outcome.error == "Invalid buffer type"

    def test_non_string_buffer_type_returns_error(self):
        assert compute(None, 7.0, 1.0, 0.1).error == "Invalid buffer type"
        assert compute(3, 7.0, 1.0, 0.1).error == "Invalid buffer type"

    def test_tags_are_case_insensitive_and_enum_accepted(self):
        by_tag = compute(" Phosphate ", 7.2, 1.0, 0.1)
        by_enum = compute(BufferType.PHOSPHATE, 7.2, 1.0, 0.1)
        assert by_tag.ok and by_enum.ok
        assert by_tag == by_enum

    def test_repeated_calls_are_identical(self):
        first = compute("citrate", 5.1, 0.75, 0.05)
        second = compute("citrate", 5.1, 0.75, 0.05)
        assert first == second


class TestRequests:
    def test_compute_request(self):
        request = BufferRequest("carbonate", 10.33, 1.0, 0.1)
        result = compute_request(request)
        assert result.ok
        assert result.buffer_type is BufferType.CARBONATE
        assert result.component(CONJUGATE_BASE).amount == "5.2995"
        assert result.component(WEAK_ACID).amount == "4.2005"

    def test_compute_many_preserves_order(self):
        requests = [
            BufferRequest("tris", 7.4, 0.5, 0.05, 37.0),
            BufferRequest("nonsense", 7.0, 1.0, 0.1),
            BufferRequest("acetate", 4.76, 1.0, 0.1),
        ]
        outcomes = compute_many(requests)

        assert [o.ok for o in outcomes] == [True, False, True]
        assert outcomes[0].buffer_type is BufferType.TRIS
        assert outcomes[2].buffer_type is BufferType.ACETATE
