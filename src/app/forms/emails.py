"""Templates HTML fixos dos emails enviados pelo serviço.

Todos os valores interpolados já chegam sanitizados (HTML escapado) do
pipeline de validação.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

FAQ_URL = "https://polypeopleprinting.com/poly-contact.html"

_CELL_KEY = "padding:6px 12px;font-weight:bold;border:1px solid #ddd;"
_CELL_VALUE = "padding:6px 12px;border:1px solid #ddd;"


def render_contact_confirmation(name: str, message: str, is_faq: bool) -> str:
    """Confirmação ao remetente do formulário de contato."""
    faq_note = (
        "<p><strong>Quick Answer:</strong> Your question looks like it might be about "
        "our services. While we review your message, check out our "
        f'<a href="{FAQ_URL}">FAQ section</a> for immediate answers!</p>'
        if is_faq
        else ""
    )

    return f"""<!DOCTYPE html>
<html>
<body>
  <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
    <h2>Thanks for reaching out, {name}!</h2>
    <p>We've received your message and will get back to you within 24 hours (usually much faster).</p>
    {faq_note}
    <p>Your message:</p>
    <blockquote style="background: #f0f0f0; padding: 15px; border-left: 4px solid #667eea;">
      {message}
    </blockquote>
    <p>Talk soon!<br>Poly People Printing Team</p>
  </div>
</body>
</html>"""


def render_quote_confirmation(
    first_name: str,
    service: str,
    quantity: int,
    timeline: str,
) -> str:
    """Confirmação ao solicitante de orçamento (rótulos legíveis)."""
    return f"""<!DOCTYPE html>
<html>
<head>
  <style>
    body {{ font-family: Arial, sans-serif; line-height: 1.6; color: #333; }}
    .container {{ max-width: 600px; margin: 0 auto; padding: 20px; }}
    .header {{ background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white; padding: 30px; text-align: center; border-radius: 10px 10px 0 0; }}
    .content {{ background: #f9f9f9; padding: 30px; border-radius: 0 0 10px 10px; }}
    .footer {{ text-align: center; margin-top: 20px; color: #666; font-size: 12px; }}
  </style>
</head>
<body>
  <div class="container">
    <div class="header">
      <h1>Quote Request Received!</h1>
    </div>
    <div class="content">
      <p>Hi {first_name},</p>
      <p>Thanks for your interest in Poly People Printing! We've received your quote request for <strong>{service}</strong>.</p>
      <h3>What You Requested:</h3>
      <ul>
        <li><strong>Service:</strong> {service}</li>
        <li><strong>Quantity:</strong> {quantity}</li>
        <li><strong>Timeline:</strong> {timeline}</li>
      </ul>
      <p>We'll review your request and send you a detailed quote within 24 hours (usually much faster!).</p>
      <p><strong>What happens next?</strong></p>
      <ol>
        <li>We'll analyze your project requirements</li>
        <li>Prepare a detailed quote with pricing options</li>
        <li>Email you the quote for review</li>
        <li>Answer any questions you have</li>
      </ol>
      <p>Questions in the meantime? Just reply to this email!</p>
      <p>Best,<br>The Poly People Printing Team</p>
    </div>
    <div class="footer">
      <p>Poly People Printing - Punderful Perfection<br>
      Auburn, WA | polypeopleprinting.com</p>
    </div>
  </div>
</body>
</html>"""


def _display(value: Any) -> str:
    if isinstance(value, bool):
        return "Yes" if value else "No"
    return str(value)


def _rows(values: Mapping[str, Any]) -> str:
    return "".join(
        f'<tr><td style="{_CELL_KEY}">{key}</td><td style="{_CELL_VALUE}">{_display(val)}</td></tr>'
        for key, val in values.items()
    )


def render_admin_fallback(
    form_title: str,
    submission: Mapping[str, Any],
    labels: Mapping[str, str] | None = None,
) -> str:
    """Alerta ao administrador quando o canal de chat não entregou.

    Tabela com todos os campos sanitizados, seguidos dos rótulos legíveis
    quando o formulário os fornece.
    """
    label_rows = _rows(labels) if labels else ""

    return f"""<!DOCTYPE html>
<html>
<body style="font-family:Arial,sans-serif;max-width:600px;margin:0 auto;">
  <div style="background:#dc2626;color:white;padding:16px;border-radius:8px 8px 0 0;">
    <h2 style="margin:0;">Discord Unavailable - {form_title} Fallback</h2>
  </div>
  <div style="background:#fef2f2;padding:20px;border-radius:0 0 8px 8px;border:1px solid #fca5a5;">
    <p>Discord webhook delivery failed. This submission was <strong>not</strong> posted to Discord. Please process manually.</p>
    <table style="width:100%;border-collapse:collapse;margin-top:12px;">
      {_rows(submission)}
      {label_rows}
    </table>
    <p style="margin-top:16px;color:#666;font-size:12px;">
      This is an automated fallback from Poly People Printing's form system.<br>
      Search the function logs for SUBMISSION_RECOVERY for additional details.
    </p>
  </div>
</body>
</html>"""
