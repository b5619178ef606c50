"""polymer-init template selection and invocation.

Lists the generators registered in an environment, asks the user which one
to use, and runs it.

Quick usage::

    from polymer_init.init import GeneratorEnvironment, InitContext, prompt_generator_selection

    env = GeneratorEnvironment()
    env.lookup()
    await prompt_generator_selection(InitContext(env=env))

Key pieces:
    list_generators             - Fresh registry snapshot
    to_choice                   - Registry entry -> prompt choice
    supports_rich_list          - MinGW console detection
    prompt_generator_selection  - Ask, then run the chosen generator
    run_generator               - Validate a name and run it
"""

from .environment import GeneratorEnvironment
from .errors import TemplateNotFoundError
from .executor import run_generator
from .formatter import display_name, to_choice
from .models import Choice, GeneratorDescriptor, InitContext
from .prompt import RichPrompter
from .registry import list_generators
from .selector import prompt_generator_selection
from .shell import supports_rich_list

__all__ = [
    # Registry
    "GeneratorEnvironment",
    "GeneratorDescriptor",
    "list_generators",
    # Formatting
    "Choice",
    "display_name",
    "to_choice",
    # Selection and execution
    "InitContext",
    "RichPrompter",
    "prompt_generator_selection",
    "run_generator",
    "supports_rich_list",
    # Errors
    "TemplateNotFoundError",
]
