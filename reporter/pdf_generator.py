# DEPENDENCIES
import math
from typing import Any
from io import BytesIO
from typing import Dict
from typing import List
from typing import Optional
from datetime import datetime
from xml.sax.saxutils import escape
from reportlab.lib import colors
from reportlab.platypus import Table
from reportlab.lib.units import inch
from reportlab.platypus import Spacer
from reportlab.lib.enums import TA_LEFT
from reportlab.platypus import Paragraph
from reportlab.platypus import TableStyle
from reportlab.lib.enums import TA_CENTER
from reportlab.graphics.shapes import Path
from reportlab.lib.enums import TA_JUSTIFY
from reportlab.lib.pagesizes import letter
from reportlab.graphics.shapes import Circle
from reportlab.graphics.shapes import String
from reportlab.graphics.shapes import Drawing
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import SimpleDocTemplate
from reportlab.platypus.flowables import KeepInFrame
from reportlab.lib.styles import getSampleStyleSheet
from config.risk_rules import RiskRules
from config.clause_catalog import Severity
from config.clause_catalog import ClauseCategory
from config.clause_catalog import SEVERITY_STYLES
from config.clause_catalog import get_category_label


class RentalReportGenerator:
    """
    PDF report of a rental contract analysis: risk ring, summary, key details, flagged clauses, recommendations
    """
    def __init__(self):
        self.styles        = getSampleStyleSheet()

        self._setup_custom_styles()

        self.page_width    = letter[0]
        self.page_height   = letter[1]
        self.margin_left   = 0.75 * inch
        self.margin_right  = 0.75 * inch
        self.margin_top    = 1.0 * inch
        self.margin_bottom = 1.0 * inch
        self.content_width = self.page_width - self.margin_left - self.margin_right


    def _setup_custom_styles(self):
        """
        Setup custom paragraph styles
        """
        self.styles.add(ParagraphStyle(name       = 'ReportTitle',
                                       parent     = self.styles['Heading1'],
                                       fontSize   = 20,
                                       textColor  = colors.HexColor('#1a1a1a'),
                                       spaceAfter = 15,
                                       alignment  = TA_CENTER,
                                       fontName   = 'Helvetica-Bold',
                                      )
                       )

        self.styles.add(ParagraphStyle(name        = 'SectionHeading',
                                       parent      = self.styles['Heading2'],
                                       fontSize    = 14,
                                       textColor   = colors.HexColor('#1a1a1a'),
                                       spaceAfter  = 10,
                                       spaceBefore = 15,
                                       fontName    = 'Helvetica-Bold',
                                      )
                       )

        self.styles.add(ParagraphStyle(name      = 'CustomBodyText',
                                       parent    = self.styles['Normal'],
                                       fontSize  = 9,
                                       leading   = 12,
                                       textColor = colors.HexColor('#333333'),
                                       alignment = TA_JUSTIFY,
                                       fontName  = 'Helvetica',
                                      )
                       )

        self.styles.add(ParagraphStyle(name         = 'BulletPoint',
                                       parent       = self.styles['Normal'],
                                       fontSize     = 9,
                                       leading      = 12,
                                       textColor    = colors.HexColor('#333333'),
                                       leftIndent   = 15,
                                       bulletIndent = 8,
                                       spaceAfter   = 3,
                                       fontName     = 'Helvetica',
                                      )
                       )

        self.styles.add(ParagraphStyle(name      = 'TableHeader',
                                       parent    = self.styles['Normal'],
                                       fontSize  = 8,
                                       leading   = 10,
                                       textColor = colors.HexColor('#ffffff'),
                                       fontName  = 'Helvetica-Bold',
                                       alignment = TA_CENTER,
                                      )
                       )

        self.styles.add(ParagraphStyle(name      = 'TableCell',
                                       parent    = self.styles['Normal'],
                                       fontSize  = 8,
                                       leading   = 10,
                                       textColor = colors.HexColor('#333333'),
                                       fontName  = 'Helvetica',
                                       alignment = TA_LEFT,
                                      )
                       )

        self.styles.add(ParagraphStyle(name      = 'ExcerptCell',
                                       parent    = self.styles['Normal'],
                                       fontSize  = 7,
                                       leading   = 9,
                                       textColor = colors.HexColor('#555555'),
                                       fontName  = 'Helvetica-Oblique',
                                       alignment = TA_LEFT,
                                      )
                       )


    def _draw_risk_score_ring(self, score: int) -> Drawing:
        """
        Ring filled proportionally to the score, colored by risk band
        """
        d                  = Drawing(140, 140)

        center_x, center_y = 70, 70
        outer_radius       = 55
        inner_radius       = 40
        color              = self._get_risk_color(score)

        bg_circle             = Circle(center_x, center_y, outer_radius)
        bg_circle.fillColor   = colors.HexColor('#f0f0f0')
        bg_circle.strokeColor = None
        d.add(bg_circle)

        if (score > 0):
            sweep_angle  = (min(score, 100) / 100.0) * 360
            start_angle  = 90
            num_segments = max(10, int(sweep_angle / 5))
            angle_step   = sweep_angle / num_segments

            p            = Path()
            p.moveTo(center_x + outer_radius * math.cos(math.radians(start_angle)),
                     center_y + outer_radius * math.sin(math.radians(start_angle)),
                    )

            for i in range(1, num_segments + 1):
                angle = math.radians(start_angle - (i * angle_step))
                p.lineTo(center_x + outer_radius * math.cos(angle), center_y + outer_radius * math.sin(angle))

            for i in range(num_segments, -1, -1):
                angle = math.radians(start_angle - (i * angle_step))
                p.lineTo(center_x + inner_radius * math.cos(angle), center_y + inner_radius * math.sin(angle))

            p.closePath()
            p.fillColor   = color
            p.strokeColor = None
            d.add(p)

        inner_circle             = Circle(center_x, center_y, inner_radius - 2)
        inner_circle.fillColor   = colors.white
        inner_circle.strokeColor = None
        d.add(inner_circle)

        score_text               = String(center_x, center_y - 12, str(score), textAnchor = 'middle')
        score_text.fontSize      = 36
        score_text.fontName      = 'Helvetica-Bold'
        score_text.fillColor     = color
        d.add(score_text)

        subtitle_text            = String(center_x, center_y - 30, "/100", textAnchor = 'middle')
        subtitle_text.fontSize   = 16
        subtitle_text.fontName   = 'Helvetica'
        subtitle_text.fillColor  = colors.HexColor('#666666')
        d.add(subtitle_text)

        return d


    def _get_risk_color(self, score: int) -> colors.Color:
        """
        Get color based on the risk band of the score
        """
        risk_level = RiskRules.get_risk_level(score)

        if (risk_level == "high"):
            return colors.HexColor('#dc2626')

        elif (risk_level == "moderate"):
            return colors.HexColor('#f97316')

        elif (risk_level == "low"):
            return colors.HexColor('#ca8a04')

        else:
            return colors.HexColor('#16a34a')


    def _get_severity_color(self, severity: str) -> str:
        """
        Hex style token for a severity value
        """
        try:
            return SEVERITY_STYLES[Severity(severity.lower())]

        except ValueError:
            return '#666666'


    def _create_header_footer(self, canvas, doc):
        """
        Add header and footer to each page
        """
        canvas.saveState()

        canvas.setFont('Helvetica-Bold', 7)
        canvas.setFillColor(colors.black)
        canvas.drawString(self.margin_left, self.page_height - 0.7 * inch, "BC Rental Contract Analysis Report")

        canvas.setFont('Helvetica', 7)
        canvas.setFillColor(colors.HexColor('#666666'))
        canvas.drawString(self.page_width - self.margin_right - 0.8 * inch, 0.6 * inch, f"Page {doc.page}")
        canvas.drawCentredString(self.page_width / 2.0, 0.6 * inch, "For informational purposes only. Not legal advice.")

        canvas.restoreState()


    def generate_report(self, analysis_result: Dict[str, Any], output_path: Optional[str] = None) -> BytesIO:
        """
        Generate PDF report from a serialized analysis result (AnalysisResult.to_dict() or the API response)

        Arguments:
        ----------
            analysis_result { dict } : Serialized analysis

            output_path     { str }  : Write to this path instead of the returned buffer

        Returns:
        --------
                { BytesIO }          : Buffer holding the PDF (empty when output_path is given)
        """
        buffer = BytesIO()

        doc    = SimpleDocTemplate(output_path or buffer,
                                   pagesize     = letter,
                                   rightMargin  = self.margin_right,
                                   leftMargin   = self.margin_left,
                                   topMargin    = self.margin_top,
                                   bottomMargin = self.margin_bottom,
                                   title        = "Rental Contract Analysis",
                                  )

        flagged   = analysis_result.get('flagged_clauses', [])
        malicious = [f for f in flagged if f.get('clause', {}).get('is_malicious')]
        notable   = [f for f in flagged if not f.get('clause', {}).get('is_malicious')]

        story     = list()
        story.extend(self._build_overview(analysis_result))
        story.extend(self._build_key_details(analysis_result.get('key_details', [])))
        story.extend(self._build_clause_table("Problematic Clauses", malicious, show_severity = True))
        story.extend(self._build_clause_table("Other Notable Clauses", notable, show_severity = False))
        story.extend(self._build_recommendations(analysis_result.get('recommendations', [])))

        doc.build(story, onFirstPage = self._create_header_footer, onLaterPages = self._create_header_footer)

        buffer.seek(0)

        return buffer


    def _build_overview(self, result: Dict) -> List:
        elements   = list()

        elements.append(Paragraph("Rental Contract Analysis Report", self.styles['ReportTitle']))
        elements.append(Paragraph(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}", self.styles['CustomBodyText']))
        elements.append(Spacer(1, 0.15 * inch))

        score      = int(result.get('overall_risk_score', 0))
        risk_level = result.get('risk_level') or RiskRules.get_risk_level(score)

        score_frame = KeepInFrame(1.6 * inch, 1.6 * inch, [self._draw_risk_score_ring(score)])
        risk_info   = Paragraph(f"<b>Overall Risk Score: {score}/100 ({escape(str(risk_level).upper())})</b>", self.styles['CustomBodyText'])

        risk_layout = Table([[score_frame, risk_info]], colWidths = [1.7 * inch, 4.0 * inch])
        risk_layout.setStyle(TableStyle([('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
                                         ('LEFTPADDING', (0, 0), (-1, -1), 0),
                                         ('RIGHTPADDING', (0, 0), (-1, -1), 0),
                                        ])
                            )

        elements.append(risk_layout)
        elements.append(Spacer(1, 0.2 * inch))

        elements.append(Paragraph("Summary", self.styles['SectionHeading']))
        elements.append(Paragraph(escape(str(result.get('summary') or 'No summary available.')), self.styles['CustomBodyText']))

        return elements


    def _build_key_details(self, key_details: List[Dict]) -> List:
        elements = [Paragraph("Key Details", self.styles['SectionHeading'])]

        if not key_details:
            elements.append(Paragraph("No key details could be extracted.", self.styles['CustomBodyText']))
            return elements

        data = [[Paragraph('<b>Detail</b>', self.styles['TableHeader']),
                 Paragraph('<b>Value</b>', self.styles['TableHeader']),
                 Paragraph('<b>Section</b>', self.styles['TableHeader']),
                ]]

        for detail in key_details:
            data.append([Paragraph(escape(str(detail.get('label', ''))), self.styles['TableCell']),
                         Paragraph(escape(str(detail.get('value', ''))), self.styles['TableCell']),
                         Paragraph(escape(self._category_label(detail.get('category'))), self.styles['TableCell']),
                        ])

        elements.append(self._styled_table(data, [1.6 * inch, 3.2 * inch, 2.0 * inch]))

        return elements


    def _build_clause_table(self, title: str, flagged: List[Dict], show_severity: bool) -> List:
        elements = [Paragraph(f"{title} ({len(flagged)})", self.styles['SectionHeading'])]

        if not flagged:
            elements.append(Paragraph("None detected.", self.styles['CustomBodyText']))
            return elements

        header   = ['Clause', 'Severity', 'Reference', 'Explanation & Excerpt'] if show_severity else ['Clause', 'Section', 'Reference', 'Explanation & Excerpt']
        data     = [[Paragraph(f'<b>{h}</b>', self.styles['TableHeader']) for h in header]]

        for item in flagged:
            clause   = item.get('clause', {})
            severity = str(clause.get('severity', ''))

            if show_severity:
                second = Paragraph(f"<font color='{self._get_severity_color(severity)}'><b>{escape(severity.upper())}</b></font>", self.styles['TableCell'])

            else:
                second = Paragraph(escape(self._category_label(clause.get('category'))), self.styles['TableCell'])

            details  = [Paragraph(escape(str(clause.get('explanation') or '')), self.styles['TableCell']),
                        Spacer(1, 3),
                        Paragraph(escape(str(item.get('matched_text') or '')), self.styles['ExcerptCell']),
                       ]

            data.append([Paragraph(f"<b>{escape(str(clause.get('name') or ''))}</b>", self.styles['TableCell']),
                         second,
                         Paragraph(escape(clause.get('legal_reference') or '-'), self.styles['TableCell']),
                         details,
                        ])

        elements.append(self._styled_table(data, [1.5 * inch, 0.9 * inch, 1.1 * inch, 3.3 * inch]))

        return elements


    def _build_recommendations(self, recommendations: List[str]) -> List:
        elements = [Paragraph("Recommendations", self.styles['SectionHeading'])]

        for recommendation in recommendations:
            elements.append(Paragraph(escape(recommendation), self.styles['BulletPoint'], bulletText = '•'))

        return elements


    @staticmethod
    def _category_label(category: Optional[str]) -> str:
        try:
            return get_category_label(ClauseCategory(category))

        except ValueError:
            return str(category or "")


    @staticmethod
    def _styled_table(data: List[List], col_widths: List[float]) -> Table:
        table = Table(data, colWidths = col_widths, repeatRows = 1)
        table.setStyle(TableStyle([('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#374151')),
                                   ('VALIGN', (0, 0), (-1, -1), 'TOP'),
                                   ('GRID', (0, 0), (-1, -1), 0.5, colors.HexColor('#d1d5db')),
                                   ('TOPPADDING', (0, 0), (-1, -1), 5),
                                   ('BOTTOMPADDING', (0, 0), (-1, -1), 5),
                                   ('LEFTPADDING', (0, 0), (-1, -1), 6),
                                   ('RIGHTPADDING', (0, 0), (-1, -1), 6),
                                  ])
                      )

        return table



def generate_pdf_report(analysis_result: Dict[str, Any], output_path: Optional[str] = None) -> BytesIO:
    """
    Convenience function to generate PDF report
    """
    generator = RentalReportGenerator()

    return generator.generate_report(analysis_result = analysis_result,
                                     output_path     = output_path,
                                    )
