"""Registry of special forms for the mal evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application. Each
handler receives the operands, the current environment and the trampolined
evaluator, and returns either a value or a TailCall for its tail position.
"""

from mal.types.symbol import Symbol
from mal.evaluation.special_forms.def_form import def_form
from mal.evaluation.special_forms.let_form import let_form
from mal.evaluation.special_forms.do_form import do_form
from mal.evaluation.special_forms.if_form import if_form
from mal.evaluation.special_forms.fn_form import fn_form

SPECIAL_FORMS = {
    Symbol("def!"): def_form,
    Symbol("let*"): let_form,
    Symbol("do"): do_form,
    Symbol("if"): if_form,
    Symbol("fn*"): fn_form,
}
