"""
Management command para validar CPF/CNPJ.

Uso:
    python manage.py validate_document 191.000.000-00
    python manage.py validate_document 11444777000161 --type cnpj
"""

from django.core.management.base import BaseCommand, CommandError

from barbearia.documents import DocumentType, format_document, guess_document_type, validate


class Command(BaseCommand):
    help = "Valida um CPF ou CNPJ (algoritmo módulo 11)"

    def add_arguments(self, parser):
        parser.add_argument("document", help="Documento, com ou sem formatação")
        parser.add_argument(
            "--type",
            choices=["cpf", "cnpj"],
            help="Tipo do documento (default: inferido pela quantidade de dígitos)",
        )

    def handle(self, *args, **options):
        document = options["document"]

        if options["type"]:
            document_type = DocumentType[options["type"].upper()]
        else:
            document_type = guess_document_type(document)
            if document_type is None:
                raise CommandError(f"Não foi possível identificar o tipo do documento: {document}")

        if not validate(document, document_type):
            raise CommandError(f"{document_type.label} inválido: {document}")

        formatted = format_document(document, document_type)
        self.stdout.write(self.style.SUCCESS(f"{document_type.label} válido: {formatted}"))
