# oiiashell

An interactive prompt that reads shell command lines, splits each one into
tokens and prints the token list. It is a tool for seeing how a line is
broken up. The package also has library functions for joining quoted text
and expanding `$` references against an environment.

## Install

```
pip install .
```

## Run

```
oiiashell
```

At the prompt, type a command line and press Enter. The shell trims the
surrounding whitespace, tokenizes the line and prints the tokens:

```
-----TOKENS AFTER PARSE-----
Type: WORD       | Text: echo
Type: WHITESPACE | Text:  
Type: DOLLAR     | Text: $
Type: WORD       | Text: HOME
```

Ctrl-C prints a new line and shows a fresh prompt; Ctrl-\ (SIGQUIT) is
ignored while the prompt runs; Ctrl-D (end of input) leaves the shell. A
line with an unmatched single quote prints `oiiashell: unclosed quote: '`
on standard error and the prompt continues. Command-line arguments are
ignored.

## What the prompt does to a line

`Shell.process` (in `oiiashell.shell`) does two things:

1. It trims spaces, tabs and the other ASCII whitespace from both ends.
2. It calls `oiiashell.lexer.lex`, which splits the line into words,
   whitespace, pipes (`|`), redirections (`<`, `>`, `<<`, `>>`), single and
   double quotes and dollar signs, and then joins everything between a pair
   of single quotes into one word (`oiiashell.lexer.process_tokens`). The
   quote tokens themselves stay in the list. Double-quoted text is not
   joined.

## What it does not do

- It does not run commands: no programs are started, and pipes and
  redirections are only recognised as tokens.
- The prompt does not expand `$` references; the `DOLLAR` token is shown
  as it is. Expansion is available as a library function,
  `oiiashell.expand.expand_dollar`, described below.
- There are no built-in commands and no exit status.

## Use as a library

```python
from oiiashell.debug import format_env, format_token_list
from oiiashell.env import Environment
from oiiashell.expand import expand_dollar
from oiiashell.lexer import lex
from oiiashell.shell import Shell
from oiiashell.tokens import TokenType

print(format_token_list(lex("cat < in.txt | wc -l")), end="")

env = Environment.from_strings(["HOME=/home/user", "EMPTY="])
print(env.get("HOME"))      # /home/user
print(env.get("MISSING"))   # empty string
print(format_env(env), end="")

tokens = lex("echo $HOME")
dollar = next(t for t in tokens if t.type is TokenType.DOLLAR)
expand_dollar(tokens, dollar, env)
print(format_token_list(tokens), end="")
# Type: WORD       | Text: echo
# Type: WHITESPACE | Text:  
# Type: WORD       | Text: /home/user

shell = Shell(["HOME=/home/user"])
print(format_token_list(shell.process("  ls -l  ")), end="")
```

`Shell()` with no argument takes its environment from `os.environ`.

### Modules

- `oiiashell.tokens` — `TokenType`, `Token` and `TokenList`, a doubly
  linked list with `append`, `last`, `remove`, `insert_after` and `clear`.
- `oiiashell.lexer` — `identify_token`, `lex`, `process_tokens`,
  `process_quote_token` and `UnclosedQuoteError`.
- `oiiashell.expand` — `expand_dollar(tokens, dollar, env, pid=None)` and
  `tokenize_value`. For a `$` token:
  - `$$` gives `pid` (the current process id when not given),
  - `$?` gives `8888` and `$-` gives `himBHs`,
  - `$` followed by a digit or one of `# @ * !` drops that one character
    and keeps the rest of the word,
  - `$NAME` is replaced by the variable's value split into word and
    whitespace tokens; an unknown name gives nothing, and text after the
    name (as in `$HOME/x`) is kept,
  - a `$` just before a quote is removed, and a `$` at the end stays as a
    word.
- `oiiashell.env` — `Environment`, an ordered list of key/value pairs
  with `from_strings`, `get`, `set`, `add`, `remove` and `items`.
  `from_strings` splits each entry on `=` and drops empty fields, so
  `A=b=c` gives the value `b` and `A=` gives no value (`None`).
- `oiiashell.chars` — `is_white_space`, `will_eat`, `valid_key_length`
  and `str_change`.
- `oiiashell.debug` — `token_type_name`, `format_token_list` and
  `format_env`; a missing text or value is shown as `(null)`.

## Tests

```
pip install .[test]
pytest
```