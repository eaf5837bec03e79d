from typing import IO

from docx import Document

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def generate_report_docx(report: dict, target: IO[bytes]):
    doc = Document()

    # Title
    doc.add_heading("AI Ethics Feedback", level=1)

    # Question
    doc.add_heading("Question", level=2)
    for line in report["question"].split("\n"):
        if line.strip():
            doc.add_paragraph(line)

    # Summary
    doc.add_heading("Summary", level=2)
    for line in report["summary"]:
        doc.add_paragraph(line)

    if report["gated"]:
        doc.save(target)
        return

    # Strengths
    if report["strengths"]:
        doc.add_heading("Strengths", level=2)
        for s in report["strengths"]:
            doc.add_paragraph(s, style="List Bullet")

    # Improvements
    if report["improvements"]:
        doc.add_heading("To Improve", level=2)
        for note in report["improvements"]:
            doc.add_paragraph(note, style="List Number")

    # Diagnostics
    doc.add_heading("Diagnostics", level=2)
    table = doc.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Area"
    table.rows[0].cells[1].text = "Status"
    for row in report["diagnostics"]:
        cells = table.add_row().cells
        cells[0].text = row["area"]
        cells[1].text = row["status"]

    # Frameworks
    doc.add_heading("Frameworks", level=2)
    for name, note in report["framework"].items():
        doc.add_heading(name, level=3)
        doc.add_paragraph(f"Expectation: {note['expectation']}")
        doc.add_paragraph(f"In this case: {note['case']}")

    # Model answer
    doc.add_heading("Model Answer", level=2)
    for paragraph in report["model_answer"].split("\n\n"):
        doc.add_paragraph(paragraph)

    doc.save(target)
