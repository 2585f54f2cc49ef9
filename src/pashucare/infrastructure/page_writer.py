"""HTML ページ出力コンポーネント"""

from typing import Optional
from pathlib import Path

from bs4 import BeautifulSoup, Tag

from ..domain.models import ALL_SPECIES, SPECIES_CHOICES, SortKey
from ..orchestration.adoption_app import ViewModel


SORT_LABELS = {
    SortKey.NEWEST: "Newest",
    SortKey.AGE_ASC: "Age: Low → High",
    SortKey.AGE_DESC: "Age: High → Low",
}

SERVICES = [
    "Rescue & Emergency Care",
    "Vaccination Camps",
    "Foster & Adoption",
    "Awareness & Education",
]


class PageWriter:
    """
    ViewModel を静的 HTML ページとして出力

    Responsibilities:
    - ヘッダー、ミッション、統計、動物一覧、申請履歴、フォームの描画
    - 出力先ディレクトリ管理

    Note: レイアウト・スタイルは扱わず、構造とデータのみを出力する
    """

    OUTPUT_DIR = Path("output")
    OUTPUT_FILENAME = "index.html"

    def __init__(self, output_dir: Optional[Path] = None):
        """
        PageWriter を初期化

        Args:
            output_dir: 出力ディレクトリ。None の場合は "output" を使用。
        """
        self.output_dir = Path(output_dir) if output_dir else self.OUTPUT_DIR

    @property
    def output_file(self) -> Path:
        return self.output_dir / self.OUTPUT_FILENAME

    def write_page(self, view_model: ViewModel) -> Path:
        """
        HTML ページをファイルに出力

        Returns:
            Path: 出力ファイルパス
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        with open(self.output_file, "w", encoding="utf-8") as f:
            f.write(self.render(view_model))
        return self.output_file

    def render(self, view_model: ViewModel) -> str:
        """
        ViewModel を HTML 文字列に変換

        Returns:
            str: HTML ドキュメント
        """
        soup = BeautifulSoup(
            "<!DOCTYPE html><html lang='en'><head><meta charset='utf-8'/></head><body></body></html>",
            "html.parser"
        )
        soup.head.append(self._tag(soup, "title", "PashuCare — Animal Welfare"))

        body = soup.body
        body.append(self._render_header(soup))

        main = soup.new_tag("main")
        main.append(self._render_mission(soup))
        main.append(self._render_stats(soup, view_model))
        main.append(self._render_filters(soup, view_model))
        main.append(self._render_animals(soup, view_model))
        main.append(self._render_adopted(soup, view_model))
        main.append(self._render_forms(soup))
        body.append(main)

        if view_model.flash is not None:
            flash = self._tag(soup, "div", view_model.flash.text, id="flash")
            flash["class"] = ["flash", view_model.flash.level.value]
            body.append(flash)

        if view_model.dialog is not None:
            body.append(self._render_dialog(soup, view_model))

        body.append(self._tag(soup, "footer", "© PashuCare — Built with ❤️"))
        return str(soup)

    def _tag(self, soup: BeautifulSoup, tag_name: str, text: Optional[str] = None, **attrs) -> Tag:
        tag = soup.new_tag(tag_name, attrs=attrs)
        if text is not None:
            tag.string = text
        return tag

    def _render_header(self, soup: BeautifulSoup) -> Tag:
        header = soup.new_tag("header")
        header.append(self._tag(soup, "h1", "PashuCare — Animal Welfare"))
        header.append(self._tag(soup, "p", "Rescue · Rehabilitate · Rehome"))
        return header

    def _render_mission(self, soup: BeautifulSoup) -> Tag:
        section = self._tag(soup, "section", id="mission")
        section.append(self._tag(soup, "h2", "Our mission"))
        section.append(self._tag(
            soup,
            "p",
            "We rescue, rehabilitate and rehome stray and abandoned animals. "
            "We also run awareness programs and low-cost vaccination camps."
        ))
        return section

    def _render_stats(self, soup: BeautifulSoup, view_model: ViewModel) -> Tag:
        stats = self._tag(soup, "section", id="stats")
        for title, value in [
            ("Rescued", view_model.stats.rescued),
            ("Adopted", str(view_model.stats.adopted)),
            ("Volunteers", view_model.stats.volunteers),
        ]:
            card = self._tag(soup, "div", **{"class": "stat-card"})
            card.append(self._tag(soup, "div", title, **{"class": "stat-title"}))
            card.append(self._tag(soup, "div", value, **{"class": "stat-value"}))
            stats.append(card)
        return stats

    def _render_filters(self, soup: BeautifulSoup, view_model: ViewModel) -> Tag:
        criteria = view_model.criteria
        form = self._tag(soup, "form", id="filters")
        form.append(self._tag(
            soup, "input", name="query", value=criteria.query, placeholder="Search by name..."
        ))

        species = self._tag(soup, "select", name="species")
        for choice in [ALL_SPECIES] + SPECIES_CHOICES:
            option = self._tag(soup, "option", choice, value=choice)
            if choice == criteria.species_filter:
                option["selected"] = "selected"
            species.append(option)
        form.append(species)

        sort = self._tag(soup, "select", name="sort")
        for key, label in SORT_LABELS.items():
            option = self._tag(soup, "option", label, value=key.value)
            if key == criteria.sort_key:
                option["selected"] = "selected"
            sort.append(option)
        form.append(sort)
        return form

    def _render_animals(self, soup: BeautifulSoup, view_model: ViewModel) -> Tag:
        section = self._tag(soup, "section", id="animals")
        if not view_model.animals:
            section.append(self._tag(
                soup, "p", "No animals match your search.", **{"class": "empty"}
            ))
            return section

        for animal in view_model.animals:
            article = self._tag(soup, "article", **{
                "class": "animal-card",
                "data-animal-id": str(animal.id),
            })
            article.append(self._tag(soup, "img", src=animal.image, alt=animal.name))
            article.append(self._tag(soup, "h3", animal.name))
            article.append(self._tag(
                soup, "p", f"{animal.species} · {animal.age} yrs · {animal.sex}", **{"class": "meta"}
            ))
            article.append(self._tag(soup, "p", animal.desc, **{"class": "desc"}))
            article.append(self._tag(soup, "button", "Adopt", **{"data-action": "adopt"}))
            article.append(self._tag(soup, "button", "Details", **{"data-action": "details"}))
            section.append(article)
        return section

    def _render_adopted(self, soup: BeautifulSoup, view_model: ViewModel) -> Tag:
        section = self._tag(soup, "section", id="adopted")
        section.append(self._tag(soup, "h3", f"Adoption requests ({len(view_model.adopted)})"))
        if not view_model.adopted:
            section.append(self._tag(soup, "p", "No adoption requests yet.", **{"class": "empty"}))
            return section

        items = soup.new_tag("ul")
        for request in view_model.adopted:
            items.append(self._tag(
                soup,
                "li",
                f"{request.animal_name} — {request.adopter_name} ({request.adopter_email}) "
                f"{request.date.isoformat()}",
                **{"data-animal-id": str(request.animal_id)}
            ))
        section.append(items)
        return section

    def _render_forms(self, soup: BeautifulSoup) -> Tag:
        aside = soup.new_tag("aside")

        contact = self._tag(soup, "form", id="contact")
        contact.append(self._tag(soup, "h3", "Contact us"))
        contact.append(self._tag(soup, "textarea", "", name="message", placeholder="Write a message..."))
        contact.append(self._tag(soup, "button", "Send", type="submit"))
        aside.append(contact)

        donate = self._tag(soup, "form", id="donate")
        donate.append(self._tag(soup, "h3", "Donate"))
        donate.append(self._tag(
            soup, "input", type="number", name="amount", placeholder="Amount (INR)"
        ))
        donate.append(self._tag(soup, "button", "Donate", type="submit"))
        aside.append(donate)

        services = soup.new_tag("ul", id="services")
        for service in SERVICES:
            services.append(self._tag(soup, "li", service))
        aside.append(services)
        return aside

    def _render_dialog(self, soup: BeautifulSoup, view_model: ViewModel) -> Tag:
        dialog_state = view_model.dialog
        dialog = self._tag(soup, "div", id="adopt-dialog", role="dialog")
        dialog.append(self._tag(soup, "h3", f"Adopt {dialog_state.animal.name}"))
        if dialog_state.message:
            dialog.append(self._tag(soup, "p", dialog_state.message, **{"class": "dialog-message"}))

        form = self._tag(soup, "form", **{"data-animal-id": str(dialog_state.animal.id)})
        form.append(self._tag(soup, "input", name="adopter_name", placeholder="Your name"))
        form.append(self._tag(soup, "input", name="adopter_email", placeholder="Email"))
        form.append(self._tag(soup, "button", "Submit", type="submit"))
        form.append(self._tag(soup, "button", "Cancel", type="button"))
        dialog.append(form)
        return dialog
