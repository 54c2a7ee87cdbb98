"""HTML fragments shared by the built-in templates"""

PAGE = """<div style="font-family: 'Times New Roman', serif; font-size: 14pt; line-height: 1.5;">"""

SHORT_PAGE = """<div style="font-family: 'Times New Roman', serif; font-size: 14pt;">"""

SIGNATURE_BLOCK = """
    <div style="margin-top: 40px;">
      <p>
        <span style="display: inline-block; width: 150px;">Дата:</span> {{date}}<br/>
        <span style="display: inline-block; width: 150px;">Подпись:</span> _____________
      </p>
    </div>"""

SHORT_SIGNATURE = """
    <p>Дата: {{date}}<br/>Подпись: _____________</p>"""
