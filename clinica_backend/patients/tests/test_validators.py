from __future__ import annotations

from django.test import SimpleTestCase

from clinica_backend.patients.validators import cpf_is_valid, search_term_errors


class CPFValidatorTest(SimpleTestCase):

    def test_valid_cpfs(self):
        self.assertTrue(cpf_is_valid("52998224725"))
        self.assertTrue(cpf_is_valid("11144477735"))
        self.assertTrue(cpf_is_valid("93541134780"))

    def test_punctuation_is_ignored(self):
        self.assertTrue(cpf_is_valid("529.982.247-25"))

    def test_wrong_check_digits(self):
        self.assertFalse(cpf_is_valid("52998224724"))
        self.assertFalse(cpf_is_valid("52998224715"))

    def test_repeated_digits_rejected(self):
        self.assertFalse(cpf_is_valid("11111111111"))
        self.assertFalse(cpf_is_valid("00000000000"))

    def test_wrong_length_or_type(self):
        self.assertFalse(cpf_is_valid("5299822472"))
        self.assertFalse(cpf_is_valid("529982247250"))
        self.assertFalse(cpf_is_valid(""))
        self.assertFalse(cpf_is_valid(None))
        self.assertFalse(cpf_is_valid(52998224725))


class SearchTermTest(SimpleTestCase):

    def test_two_characters_accepted(self):
        self.assertEqual(search_term_errors("ab"), [])

    def test_accented_names_hyphens_and_apostrophes_accepted(self):
        self.assertEqual(search_term_errors("José D'Ávila-Conceição"), [])

    def test_single_character_rejected(self):
        errors = search_term_errors("a")
        self.assertEqual(len(errors), 1)
        self.assertIn("entre 2 e 80", errors[0])

    def test_eighty_one_characters_rejected(self):
        self.assertEqual(search_term_errors("a" * 80), [])
        errors = search_term_errors("a" * 81)
        self.assertEqual(len(errors), 1)

    def test_injection_attempt_rejected_by_both_lists(self):
        errors = search_term_errors("'; DROP TABLE")
        self.assertIn("A entrada contém caracteres ou palavras não permitidas.", errors)
        self.assertIn("O nome deve conter apenas letras, espaços e hífens.", errors)

    def test_sql_keyword_alone_rejected(self):
        # Letters only, so the allow-list passes; the deny-list must catch it.
        errors = search_term_errors("select")
        self.assertEqual(errors, ["A entrada contém caracteres ou palavras não permitidas."])

    def test_keyword_inside_a_name_is_allowed(self):
        self.assertEqual(search_term_errors("Adropina"), [])

    def test_digits_and_markup_rejected(self):
        self.assertTrue(search_term_errors("Maria 2"))
        self.assertTrue(search_term_errors("<script>"))

    def test_non_string_rejected(self):
        self.assertEqual(search_term_errors(42), ["O campo de busca deve ser um texto."])
