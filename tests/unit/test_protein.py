"""
Unit tests for protein operations.

Tests translation, mRNA inference and mass calculation.
"""

import pytest

from codonkit.core.errors import CodonParseError, UnknownAminoAcid, UnknownCodon
from codonkit.nucleotides.transcription import transcribe
from codonkit.protein.mass import protein_mass, round_half_away
from codonkit.protein.mrna_count import MODULUS, count_source_rna
from codonkit.protein.translation import translate, usable_length
from codonkit.utils.codon_table import CODON_TABLE, degeneracy


@pytest.mark.unit
class TestTranslate:
    """Tests for RNA to protein translation."""

    def test_translate_sample(self):
        """Test translation up to the terminal stop codon."""
        rna = "AUGGCCAUGGCGCCCAGAACUGAGAUCAAUAGUACCCGUAUUAACGGGUGA"
        assert translate(rna) == "MAMAPRTEINSTRING"

    def test_trailing_newline(self):
        """Test a single trailing newline is tolerated."""
        assert translate("AUGUGA\n") == "M"

    def test_no_stop_codon(self):
        """Test the whole sequence is translated without a stop."""
        assert translate("AUGGCC") == "MA"

    def test_stop_first(self):
        """Test a leading stop codon yields an empty protein."""
        assert translate("UAAAUG") == ""

    def test_empty(self):
        """Test empty input yields an empty protein."""
        assert translate("") == ""
        assert translate("\n") == ""

    def test_codon_parse_error(self):
        """Test length not divisible by 3."""
        with pytest.raises(CodonParseError) as exc_info:
            translate("Z")
        assert exc_info.value.length == 1

    def test_length_checked_before_decoding(self):
        """Test misaligned length is reported before an invalid first codon."""
        with pytest.raises(CodonParseError) as exc_info:
            translate("ZZZZ")
        assert exc_info.value.length == 4

    def test_two_newlines_not_tolerated(self):
        """Test only one trailing newline is stripped."""
        with pytest.raises(CodonParseError):
            translate("AUG\n\n")

    def test_unknown_codon(self):
        """Test invalid codon carries its text."""
        with pytest.raises(UnknownCodon) as exc_info:
            translate("ZZZ")
        assert exc_info.value == UnknownCodon("ZZZ")

    def test_unknown_codon_before_stop(self):
        """Test an invalid codon before the stop aborts translation."""
        with pytest.raises(UnknownCodon) as exc_info:
            translate("AUGZZZUAA")
        assert exc_info.value.codon == "ZZZ"

    def test_invalid_text_after_stop_is_not_read(self):
        """Test windows after the stop codon are never decoded."""
        assert translate("AUGUAAZZZ") == "M"

    def test_every_single_codon(self):
        """Test each codon translates on its own."""
        for codon, acid in CODON_TABLE.items():
            assert translate(codon) == acid.code

    def test_output_not_longer_than_codon_count(self):
        """Test output is truncated at the first stop."""
        rna = "GCU" * 5 + "UAG" + "GCU" * 5
        protein = translate(rna)
        assert protein == "AAAAA"
        assert len(protein) <= usable_length(rna) // 3

    def test_translate_transcribed_dna(self):
        """Test transcription composes with translation."""
        assert translate(transcribe("ATGGCCTGA")) == "MA"

    def test_repeatable(self):
        """Test repeated calls give identical results."""
        rna = "AUGGCCAUGGCGCCCAGAACUGAGAUCAAUAGUACCCGUAUUAACGGGUGA"
        assert translate(rna) == translate(rna)


@pytest.mark.unit
class TestCountSourceRna:
    """Tests for counting candidate source mRNAs."""

    def test_count_sample(self):
        """Test count for a two-residue protein."""
        assert count_source_rna("MA") == 12

    def test_empty_protein_is_zero(self):
        """Test empty protein counts as 0."""
        assert count_source_rna("") == 0

    def test_newline_only_counts_stop_codons(self):
        """Test a lone newline leaves only the stop multiplier."""
        assert count_source_rna("\n") == 3

    def test_unknown_amino_acid(self):
        """Test unknown code carries the offending character."""
        with pytest.raises(UnknownAminoAcid) as exc_info:
            count_source_rna("B")
        assert exc_info.value == UnknownAminoAcid("B")

    def test_first_error_wins(self):
        """Test the first unknown character is reported."""
        with pytest.raises(UnknownAminoAcid) as exc_info:
            count_source_rna("MXBZ")
        assert exc_info.value.amino_acid == "X"

    def test_large_product_is_reduced(self):
        """Test running reduction matches the exact product."""
        # 6**10 * 3 = 181398528
        assert count_source_rna("L" * 10) == 398528

    def test_matches_exact_product(self):
        """Test a long protein against the unreduced product."""
        protein = "MAMAPRTEINSTRING" * 60
        exact = 3
        for code in protein:
            exact *= degeneracy(code)
        assert count_source_rna(protein) == exact % MODULUS

    def test_result_below_modulus(self):
        """Test result stays in range."""
        assert 0 <= count_source_rna("LRS" * 200) < MODULUS

    def test_custom_modulus(self):
        """Test a caller-supplied modulus."""
        assert count_source_rna("MA", modulus=10) == 2

    def test_zero_product_short_circuits(self):
        """Test a zero running product returns before later residues."""
        assert count_source_rna("AB", modulus=2) == 0

    def test_newline_inside_protein_is_skipped(self):
        """Test newlines are skipped anywhere, not only at the end."""
        assert count_source_rna("M\nA") == count_source_rna("MA")

    def test_repeatable(self):
        """Test repeated calls give identical results."""
        protein = "MAMAPRTEINSTRING" * 60
        assert count_source_rna(protein) == count_source_rna(protein)


@pytest.mark.unit
class TestProteinMass:
    """Tests for monoisotopic protein mass."""

    def test_mass_sample(self):
        """Test mass with a trailing newline."""
        assert protein_mass("SKADYEK\n") == 821.392

    def test_mass_without_newline(self):
        """Test mass without a newline."""
        assert protein_mass("SKADYEK") == 821.392

    def test_two_residues(self):
        """Test rounding to 3 decimals."""
        assert protein_mass("MA") == 202.078

    def test_empty(self):
        """Test empty protein has zero mass."""
        assert protein_mass("") == 0.0

    def test_unknown_amino_acid(self):
        """Test unknown code carries the offending character."""
        with pytest.raises(UnknownAminoAcid) as exc_info:
            protein_mass("AB")
        assert exc_info.value == UnknownAminoAcid("B")

    def test_newline_inside_protein_is_skipped(self):
        """Test newlines contribute 0.0 anywhere."""
        assert protein_mass("A\nA") == protein_mass("AA") == 142.074

    def test_round_half_away_from_zero(self):
        """Test ties round away from zero."""
        assert round_half_away(2.5, digits=0) == 3.0
        assert round_half_away(-2.5, digits=0) == -3.0
        assert round_half_away(1.25, digits=1) == 1.3
        assert round_half_away(821.39192) == 821.392

    def test_repeatable(self):
        """Test repeated calls give identical results."""
        protein = "SKADYEK" * 50
        assert protein_mass(protein) == protein_mass(protein)
