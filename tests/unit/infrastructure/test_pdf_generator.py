from __future__ import annotations

from datetime import date

from reportlab.platypus import PageBreak

from agromano.domain.models.animal import Animal
from agromano.domain.models.explotacion import Explotacion
from agromano.domain.models.informe import AnimalNode, DateRange, ExplotacionNode, TitularNode
from agromano.domain.models.movimiento import Movimiento
from agromano.domain.models.parcela import Parcela
from agromano.domain.models.titular import Titular
from agromano.infrastructure.reports.pdf_generator import PDFGenerator


def _tree(explotaciones: int) -> TitularNode:
    nodes = []
    for index in range(explotaciones):
        animal = Animal(id=index, identificacion=f"ES-<{index}>", id_explotacion=index)
        nodes.append(
            ExplotacionNode(
                explotacion=Explotacion(
                    id=index, codigo=f"R{index}", nombre=f"Finca & {index}", id_titular=1
                ),
                parcelas=[Parcela(id=index, id_explotacion=index, extension=2.0)],
                animales=[
                    AnimalNode(
                        animal=animal,
                        movimientos=[
                            Movimiento(id=1, tipo="entrada", fecha=date(2024, 1, 1), id_animal=index)
                        ],
                    )
                ],
            )
        )
    titular = Titular(id=1, nombre="Ana", nif="1Z", id_usuario=1, telefono=None)
    return TitularNode(titular=titular, usuario=None, explotaciones=nodes)


def test_one_page_break_between_explotaciones():
    elements = PDFGenerator().create_report(_tree(3))
    assert sum(isinstance(e, PageBreak) for e in elements) == 2


def test_empty_sections_are_omitted():
    generator = PDFGenerator()
    assert generator.create_table_section("Medicamentos", [], ["Fecha"]) == []


def test_generate_pdf_returns_document_bytes():
    generator = PDFGenerator()
    rango = DateRange(start=date(2024, 1, 1), end=date(2024, 12, 31))
    pdf = generator.generate_pdf(generator.create_report(_tree(2), rango))
    assert pdf.startswith(b"%PDF")
