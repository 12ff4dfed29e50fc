from __future__ import annotations

from django.test import SimpleTestCase

from clinica_backend.patients.sanitizers import (
    sanitize_address_payload,
    sanitize_patient_payload,
)


class SanitizePatientPayloadTest(SimpleTestCase):

    def test_text_fields_normalized(self):
        cleaned = sanitize_patient_payload({
            "cpf": " 529.982.247-25 ",
            "nome": "  <b>Maria</b>   da   Silva ",
            "email": "  Maria.Silva@Example.COM ",
            "telefone": "(11) 98765-4321",
        })

        self.assertEqual(cleaned["cpf"], "52998224725")
        self.assertEqual(cleaned["nome"], "Maria da Silva")
        self.assertEqual(cleaned["email"], "maria.silva@example.com")
        self.assertEqual(cleaned["telefone"], "11987654321")

    def test_password_untouched(self):
        cleaned = sanitize_patient_payload({"senha": "  com espaços <b> "})
        self.assertEqual(cleaned["senha"], "  com espaços <b> ")

    def test_absent_keys_stay_absent(self):
        cleaned = sanitize_patient_payload({"nome": "Ana"})
        self.assertEqual(cleaned, {"nome": "Ana"})

    def test_non_strings_passed_through(self):
        cleaned = sanitize_patient_payload({"nome": 123, "esta_ativo": "sim", "planos_saude": [0, "Amil"]})
        self.assertEqual(cleaned["nome"], 123)
        self.assertEqual(cleaned["esta_ativo"], "sim")
        self.assertEqual(cleaned["planos_saude"], [0, "Amil"])

    def test_historico_string_becomes_list_without_blanks(self):
        self.assertEqual(sanitize_patient_payload({"historico": " Hipertensão "})["historico"], ["Hipertensão"])
        self.assertEqual(
            sanitize_patient_payload({"historico": ["<i>Asma</i>", "   ", ""]})["historico"],
            ["Asma"],
        )

    def test_nested_address_sanitized(self):
        cleaned = sanitize_patient_payload({"endereco": {"cep": "11111111", "estado": " sp ", "rua": " A St "}})
        self.assertEqual(cleaned["endereco"], {"cep": "11111-111", "estado": "SP", "rua": "A St"})

    def test_null_address_kept(self):
        self.assertIsNone(sanitize_patient_payload({"endereco": None})["endereco"])

    def test_non_mapping_payload(self):
        self.assertEqual(sanitize_patient_payload(["not", "a", "dict"]), {})


class SanitizeAddressPayloadTest(SimpleTestCase):

    def test_formatted_cep_kept(self):
        self.assertEqual(sanitize_address_payload({"cep": "11111-111"}), {"cep": "11111-111"})

    def test_short_cep_left_for_validation(self):
        self.assertEqual(sanitize_address_payload({"cep": " 1234 "}), {"cep": "1234"})

    def test_unknown_keys_dropped(self):
        cleaned = sanitize_address_payload({"numero": " 10 ", "bairro": "Centro"})
        self.assertEqual(cleaned, {"numero": "10"})
