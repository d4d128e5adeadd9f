"""Example script: label one raw document against its tokenized version."""

from iobify import iobify
from iobify.alignment import to_pairwise_alignment
from iobify.formatting import format_document
from iobify.reader import prepare_tokenized_line


def main() -> None:
    raw = "Mr.Smith arrived(late). He left."
    tok = prepare_tokenized_line("Mr. Smith arrived ( late ) .<SENT>He left .")

    print(to_pairwise_alignment(raw, tok))

    labels = iobify(raw, tok)
    print("".join(label.value for label in labels))
    print(raw)

    print(format_document(raw, labels), end="")


if __name__ == "__main__":
    main()
