from flask_wtf import FlaskForm
from wtforms import StringField
from wtforms.validators import Length, Optional

from config import MAX_TERM_LENGTH


class SearchForm(FlaskForm):
    """Search box, submitted with GET so it carries no CSRF token."""

    class Meta:
        csrf = False

    q = StringField(
        "Search apps", validators=[Optional(), Length(max=MAX_TERM_LENGTH)]
    )
