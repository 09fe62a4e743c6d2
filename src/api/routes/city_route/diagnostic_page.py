"""Página HTML de diagnóstico servida em GET sem body.

Apoio para teste manual: mostra o status do endpoint e um formulário que
envia uma seleção de exemplo via POST para a mesma URL. Não faz parte do
contrato JSON do relay.
"""

from __future__ import annotations

from html import escape

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="fa" dir="rtl">
<head>
    <meta charset="utf-8">
    <title>Webhook Test Page - City Selection</title>
    <style>
        body {{ font-family: Arial, sans-serif; padding: 20px; direction: rtl; }}
        .container {{ max-width: 800px; margin: 0 auto; }}
        .status {{ padding: 10px; margin: 10px 0; border-radius: 5px; }}
        .success {{ background: #d4edda; color: #155724; }}
        .warning {{ background: #fff3cd; color: #856404; }}
        .test-form {{ background: #f8f9fa; padding: 20px; border-radius: 10px; }}
        .test-form div {{ margin-bottom: 8px; }}
        pre {{ direction: ltr; text-align: left; background: #fff; padding: 10px; }}
    </style>
</head>
<body>
    <div class="container">
        <h1>وب‌هوک انتخاب شهر - صفحه تست</h1>

        <div class="status {status_class}">
            <strong>وضعیت:</strong> {status_text}
        </div>

        <div class="test-form">
            <h2>تست وب‌هوک</h2>
            <p>از این فرم برای تست دستی وب‌هوک استفاده کنید:</p>

            <form id="testForm">
                <div>
                    <label for="originCountry">کشور مبدا:</label>
                    <select id="originCountry">
                        <option value="IR">ایران</option>
                        <option value="OM">عمان</option>
                    </select>
                </div>
                <div>
                    <label for="originCity">شهر مبدا:</label>
                    <input type="text" id="originCity" value="تهران">
                </div>
                <div>
                    <label for="destinationCountry">کشور مقصد:</label>
                    <select id="destinationCountry">
                        <option value="OM">عمان</option>
                        <option value="IR">ایران</option>
                    </select>
                </div>
                <div>
                    <label for="destinationCity">شهر مقصد:</label>
                    <input type="text" id="destinationCity" value="مسقط">
                </div>
                <button type="button" onclick="testWebhook()">تست وب‌هوک</button>
            </form>

            <div id="testResult"></div>
        </div>
    </div>

    <script>
        const COUNTRIES = {{
            IR: {{ name: 'ایران', name_en: 'Iran' }},
            OM: {{ name: 'عمان', name_en: 'Oman' }}
        }};

        function buildSide(countryId, cityId, cityCode, cityNameEn, population) {{
            const code = document.getElementById(countryId).value;
            return {{
                country: {{ code: code, name: COUNTRIES[code].name, name_en: COUNTRIES[code].name_en }},
                city: {{
                    code: cityCode,
                    name: document.getElementById(cityId).value,
                    name_en: cityNameEn,
                    population: population
                }}
            }};
        }}

        async function testWebhook() {{
            const origin = buildSide('originCountry', 'originCity', 'THR', 'Tehran', '8.7M');
            const destination = buildSide('destinationCountry', 'destinationCity', 'MCT', 'Muscat', '1.3M');
            const data = {{
                action: 'city_route_selected',
                route_type: origin.country.code === destination.country.code ? 'domestic' : 'international',
                origin: origin,
                destination: destination,
                display_text: 'از ' + origin.city.name + ' به ' + destination.city.name,
                source: 'web_test',
                timestamp: new Date().toISOString()
            }};
            const target = document.getElementById('testResult');
            try {{
                const response = await fetch(window.location.href, {{
                    method: 'POST',
                    headers: {{ 'Content-Type': 'application/json' }},
                    body: JSON.stringify(data)
                }});
                const result = await response.json();
                target.innerHTML = '<pre></pre>';
                target.firstChild.textContent = JSON.stringify(result, null, 2);
            }} catch (error) {{
                target.textContent = 'خطا: ' + error.message;
            }}
        }}
    </script>
</body>
</html>
"""


def render_diagnostic_page(webhook_configured: bool) -> str:
    """Renderiza a página de teste com o status de configuração do destino."""
    if webhook_configured:
        status_class, status_text = "success", "وب‌هوک در حال اجراست"
    else:
        status_class, status_text = "warning", "وب‌هوک در حال اجراست، اما آدرس n8n تنظیم نشده است"
    return _PAGE_TEMPLATE.format(
        status_class=escape(status_class),
        status_text=escape(status_text),
    )
