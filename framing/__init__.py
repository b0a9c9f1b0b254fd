# SPDX-FileCopyrightText: © 2018 Bart Hanssens
# SPDX-License-Identifier: BSD-2-Clause

from pyld import jsonld

from .loaders import local_document_loader


# Override PyLD's default Requests-based document loader
# so @context references to local files resolve from disk.
jsonld.set_document_loader(local_document_loader())
