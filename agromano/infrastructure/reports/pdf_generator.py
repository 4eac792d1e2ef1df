from __future__ import annotations

import io
from datetime import date, datetime, timezone
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import PageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from agromano.domain.models.informe import AnimalNode, DateRange, ExplotacionNode, TitularNode


def _fmt(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Sí" if value else "No"
    if isinstance(value, (date, datetime)):
        return value.strftime("%Y-%m-%d")
    return str(value)


class PDFGenerator:
    def __init__(self):
        self.styles = getSampleStyleSheet()
        self._setup_custom_styles()

    def _setup_custom_styles(self):
        """Setup custom paragraph styles"""
        self.styles.add(
            ParagraphStyle(
                name="CustomTitle",
                parent=self.styles["Heading1"],
                fontSize=20,
                spaceAfter=20,
                textColor=colors.HexColor("#1a237e"),
                alignment=1,  # Center
            )
        )

        self.styles.add(
            ParagraphStyle(
                name="CustomHeading",
                parent=self.styles["Heading2"],
                fontSize=16,
                spaceAfter=10,
                textColor=colors.HexColor("#0d47a1"),
            )
        )

        self.styles.add(
            ParagraphStyle(
                name="CustomSubheading",
                parent=self.styles["Heading3"],
                fontSize=13,
                spaceAfter=6,
                textColor=colors.HexColor("#00796b"),
            )
        )

        self.styles.add(
            ParagraphStyle(
                name="AnimalSubheading",
                parent=self.styles["Heading4"],
                fontSize=11,
                spaceAfter=4,
                leftIndent=12,
                textColor=colors.HexColor("#5d4037"),
            )
        )

    def _text(self, value, style: str = "Normal") -> Paragraph:
        return Paragraph(escape(_fmt(value)), self.styles[style])

    def create_header(self, tree: TitularNode, date_range: DateRange | None = None) -> list:
        """Title block with the titular's identifying data."""
        titular = tree.titular
        elements = [self._text(f"Informe de Titular: {titular.nombre}", "CustomTitle")]
        if date_range is not None:
            elements.append(
                self._text(
                    f"Periodo: {_fmt(date_range.start)} a {_fmt(date_range.end)}",
                    "CustomSubheading",
                )
            )
        elements.append(self._text(f"NIF: {_fmt(titular.nif)}"))
        elements.append(self._text(f"Domicilio: {_fmt(titular.domicilio)}"))
        elements.append(
            self._text(f"Localidad: {_fmt(titular.localidad)}, {_fmt(titular.provincia)}")
        )
        elements.append(self._text(f"Teléfono: {_fmt(titular.telefono)}"))

        gen_date = datetime.now(timezone.utc).strftime("%d/%m/%Y %H:%M UTC")
        elements.append(self._text(f"Generado el: {gen_date}"))
        elements.append(Spacer(1, 20))
        return elements

    def create_table_section(
        self,
        title: str,
        rows: list[list],
        columns: list[str],
        *,
        style: str = "CustomSubheading",
        width: float = 6.5 * inch,
    ) -> list:
        """Heading plus a table; nothing at all when there are no rows."""
        if not rows:
            return []
        table_data = [columns]
        for row in rows:
            table_data.append([self._text(value) for value in row])

        col_width = width / len(columns)
        # Rows taller than a page (long free text) continue on the next one
        table = Table(
            table_data, colWidths=[col_width] * len(columns), repeatRows=1, splitInRow=1
        )
        table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), colors.darkblue),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, 0), 9),
                    ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
                    ("BACKGROUND", (0, 1), (-1, -1), colors.beige),
                    ("TEXTCOLOR", (0, 1), (-1, -1), colors.black),
                    ("FONTNAME", (0, 1), (-1, -1), "Helvetica"),
                    ("FONTSIZE", (0, 1), (-1, -1), 8),
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
                    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                ]
            )
        )
        return [Paragraph(escape(title), self.styles[style]), table, Spacer(1, 12)]

    def create_explotacion_section(self, node: ExplotacionNode) -> list:
        explotacion = node.explotacion
        elements = [
            self._text(f"Explotación: {explotacion.nombre}", "CustomHeading"),
            self._text(f"Código REGA: {_fmt(explotacion.codigo)}"),
            self._text(f"Dirección: {_fmt(explotacion.direccion)}"),
            self._text(f"Localidad: {_fmt(explotacion.localidad)}, {_fmt(explotacion.provincia)}"),
            Spacer(1, 12),
        ]
        elements += self.create_table_section(
            "Parcelas",
            [[p.coordenadas, f"{_fmt(p.extension)} ha"] for p in node.parcelas],
            ["Coordenadas", "Extensión"],
        )
        elements += self.create_table_section(
            "Alimentación",
            [
                [a.fecha, a.tipo, f"{_fmt(a.cantidad)} kg", a.lote, a.factura]
                for a in node.alimentacion
            ],
            ["Fecha", "Tipo", "Cantidad", "Lote", "Factura"],
        )
        elements += self.create_table_section(
            "Medicamentos",
            [[m.fecha, m.receta, m.medicamento, m.factura] for m in node.medicamentos],
            ["Fecha", "Receta", "Medicamento", "Factura"],
        )
        elements += self.create_table_section(
            "Inspecciones",
            [[i.fecha, i.tipo, i.oficial, i.numero_acta] for i in node.inspecciones],
            ["Fecha", "Tipo", "Oficial", "Nº Acta"],
        )
        if node.animales:
            elements.append(self._text("Animales", "CustomSubheading"))
            for animal_node in node.animales:
                elements += self.create_animal_section(animal_node)
        return elements

    def create_animal_section(self, node: AnimalNode) -> list:
        animal = node.animal
        elements = [
            self._text(f"ID: {animal.identificacion}", "Heading4"),
            self._text(f"Especie: {_fmt(animal.especie)}, Estado: {_fmt(animal.estado)}"),
        ]
        if animal.fecha_nacimiento:
            elements.append(self._text(f"Nacimiento: {_fmt(animal.fecha_nacimiento)}"))
        if animal.fecha_alta:
            elements.append(self._text(f"Alta: {_fmt(animal.fecha_alta)}"))
        elements.append(Spacer(1, 6))

        sub = {"style": "AnimalSubheading", "width": 6.0 * inch}
        elements += self.create_table_section(
            "Movimientos",
            [[m.fecha, m.tipo, m.motivo, m.procedencia_destino] for m in node.movimientos],
            ["Fecha", "Tipo", "Motivo", "Origen/Destino"],
            **sub,
        )
        elements += self.create_table_section(
            "Incidencias",
            [
                [i.fecha, i.descripcion, i.codigo_anterior, i.codigo_actual]
                for i in node.incidencias
            ],
            ["Fecha", "Descripción", "Código anterior", "Código actual"],
            **sub,
        )
        elements += self.create_table_section(
            "Vacunaciones",
            [
                [v.fecha, v.tipo, v.dosis, v.nombre_comercial, v.veterinario]
                for v in node.vacunaciones
            ],
            ["Fecha", "Tipo", "Dosis", "Nombre comercial", "Veterinario"],
            **sub,
        )
        return elements

    def create_report(self, tree: TitularNode, date_range: DateRange | None = None) -> list:
        elements = self.create_header(tree, date_range)
        for index, node in enumerate(tree.explotaciones):
            if index > 0:
                elements.append(PageBreak())
            elements += self.create_explotacion_section(node)
        return elements

    def generate_pdf(self, elements: list) -> bytes:
        """Render the flowables into an A4 document and return its bytes."""
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer, pagesize=A4, rightMargin=40, leftMargin=40, topMargin=40, bottomMargin=40
        )

        doc.build(elements)
        pdf_data = buffer.getvalue()
        buffer.close()
        return pdf_data
