"""
Management command para testar o envio de WhatsApp.

Uso:
    python manage.py send_test_whatsapp +5511999999999
    python manage.py send_test_whatsapp 11999999999 --message "Oi!" --gateway console
"""

from concurrent import futures

from django.core.management.base import BaseCommand, CommandError

from barbearia.exceptions import BarbeariaError
from barbearia.notifications import send_whatsapp


class Command(BaseCommand):
    help = "Envia uma mensagem WhatsApp de teste pelo gateway configurado"

    def add_arguments(self, parser):
        parser.add_argument("phone", help="Número de destino (ex: +5511999999999)")
        parser.add_argument(
            "--message",
            default="Mensagem de teste da Sua Barbearia ✂️",
            help="Conteúdo da mensagem",
        )
        parser.add_argument(
            "--gateway",
            help="Nome do gateway (default: DEFAULT_GATEWAY das settings)",
        )
        parser.add_argument(
            "--timeout",
            type=float,
            default=30.0,
            help="Segundos para aguardar a entrega (default: 30)",
        )

    def handle(self, *args, **options):
        try:
            future = send_whatsapp(options["phone"], options["message"], gateway=options["gateway"])
            result = future.result(timeout=options["timeout"])
        except BarbeariaError as e:
            raise CommandError(f"Falha no envio [{e.code}]: {e.message}")
        except futures.TimeoutError:
            raise CommandError(f"Envio não concluído em {options['timeout']}s")

        if result.skipped:
            self.stdout.write(
                self.style.WARNING("Gateway desabilitado ou sem credenciais. Nada foi enviado.")
            )
            return

        self.stdout.write(self.style.SUCCESS(f"WhatsApp enviado. ID: {result.message_id}"))
