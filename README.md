# minigit

A very small version control system. It keeps file snapshots, commits,
branches, merges and line diffs in a `.minigit` directory inside the
current working directory. It has no dependencies beyond the standard
library.

## Installation

```
pip install .
```

## Commands

Each command works on the repository in the current directory.

```
minigit init                      # create .minigit/
minigit add notes.txt             # store the file's content and stage it
minigit commit -m "first notes"   # record the staged content as a commit
minigit log                       # list commits reachable from HEAD, newest first
minigit branch feature            # new branch at the commit HEAD's branch points to
minigit checkout feature          # switch to a branch, or to a commit hash
minigit merge feature             # merge a branch into the working directory
minigit diff <commit1> <commit2>  # compare the stored files line by line
```

A missing argument prints a usage line and exits with status 1. An
unknown command prints `Unknown command: <name>`. When an operation
fails (a file, branch or commit that does not exist, a branch that
already exists, a malformed HEAD) the message goes to standard error and
the exit status is 1.

### How content is stored

- `minigit init` creates `.minigit/` with `objects/`, `commits/`,
  `refs/`, an empty `refs/main` and `HEAD` holding `ref: refs/main`.
  Running it again only reports that the repository already exists.
- `minigit add` hashes a file's content (a 64-bit djb2 hash shown in
  hex) and saves it under `.minigit/objects/<hash>`; the hash is
  appended to `.minigit/stage`.
- `minigit commit -m <message>` writes `.minigit/commits/<hash>` with
  lines `commit:`, `timestamp:`, `message:`, `parent:` and one `blob:`
  line per staged hash. The commit's hash comes from the timestamp, the
  message and the parent. It then points `refs/main` at the commit, sets
  `HEAD` to `ref: refs/main` and empties the stage. With nothing staged
  it prints `Nothing to commit. Stage some files first.`
- `minigit checkout <branch>` writes every blob of the branch's commit
  into the working directory and sets `HEAD` to `ref: refs/<branch>`.
  Given a commit hash instead, it restores that commit's blobs and
  stores the bare hash in `HEAD` (a detached HEAD).

### Merging

`minigit merge <branch>` finds the nearest common ancestor of the commit
on `refs/main` and the branch's commit. For each file in the ancestor, a
file only the branch changed is taken from the branch; a file both sides
changed differently is written with conflict markers:

```
<<<<<<< current
...current content...
=======
...branch content...
>>>>>>> feature
```

Resolve the conflicts, then add and commit the result.

### Diffs

`minigit diff <commit1> <commit2>` pairs the blobs of the two commits by
their position and prints each differing line as

```
Line 3:
- old text
+ new text
```

or `No differences found.` when nothing differs.

## Using it from Python

Every command is also a function; each takes the repository root as its
last argument and defaults to the current directory.

```python
from pathlib import Path
from minigit.initialize import init_repo
from minigit.add import add_file_to_stage
from minigit.commit import commit
from minigit.log import iter_log

root = Path.cwd()
init_repo(root)
add_file_to_stage("notes.txt", root)     # returns the blob hash
record = commit("first notes", root)     # returns a Commit, or None
for entry in iter_log(root):             # LogEntry(hash, timestamp, message, parent)
    print(entry.hash, entry.message)
```

The other modules work the same way:

- `minigit.branch.create_branch(name, root)` returns the commit hash the
  new branch points to.
- `minigit.checkout.checkout(target, root)` and
  `restore_files_from_commit(commit_hash, root)` return the paths written.
- `minigit.merge.merge(branch, root)` returns the names of conflicted
  files; `find_lca` and `get_blobs` are available on their own.
- `minigit.diff.diff(hash1, hash2, root)` returns a list of
  `(line number, old line, new line)` tuples.
- `minigit.log.show_log(root)` prints the log and returns its entries.
- `minigit.objects` holds `Blob`, `Commit` (with `render()`) and
  `parse_commit(text)`; `minigit.hasher.simple_hash` computes the hash.

Failures raise `minigit.storage.MiniGitError`.

## What it does not do

- Blobs do not record file names. Checkout and merge write files into the
  working directory as `<blob-hash>.txt`, not under their original names.
- Commits always go on `main`: `commit` moves `refs/main` and resets
  `HEAD` to it, whichever branch was checked out. Merges start from
  `refs/main` too.
- A merge only updates working files; it does not create a merge commit.
- There is no status, remove, reset or branch listing command, and no
  remote repositories.