import logging
from typing import Iterator, Optional

logger = logging.getLogger(__name__)


class StaleReferenceError(RuntimeError):
    """Se usó un ElementRef después de modificar la pila."""


class _Node:
    """Nodo de la cadena: un elemento y el enlace al siguiente (o None)"""

    __slots__ = ("elem", "next")

    def __init__(self, elem, next=None):
        self.elem = elem
        self.next = next


class ElementRef:
    """
    Acceso de escritura al elemento del tope, sin sacarlo de la pila.
    Solo es válido hasta la siguiente modificación de la pila.
    """

    __slots__ = ("_stack", "_node", "_version")

    def __init__(self, stack, node):
        self._stack = stack
        self._node = node
        self._version = stack._version

    def _check(self):
        if self._stack._version != self._version:
            raise StaleReferenceError("stack was modified after peek_mut()")

    @property
    def value(self):
        self._check()
        return self._node.elem

    @value.setter
    def value(self, elem):
        self._check()
        self._node.elem = elem


class Stack:
    """
    Pila (LIFO) sobre una lista simplemente enlazada.
    Cada nodo pertenece solo a su predecesor; el primero, a la pila.

    Complejidad: O(1) push/pop/peek, O(n) destrucción sin recursión
    """

    def __init__(self):
        self._head = None
        self._size = 0
        self._version = 0

    def _take_head(self):
        """Saca el enlace de la cabeza y deja la pila vacía en su lugar"""
        head, self._head = self._head, None
        return head

    def _pop_node(self):
        """
        Desengancha el nodo del tope y lo retorna con su `next` ya en None,
        así liberarlo no arrastra al resto de la cadena.
        """
        node = self._take_head()
        if node is None:
            return None
        self._head, node.next = node.next, None
        self._size -= 1
        self._version += 1
        return node

    def push(self, elem):
        """Agrega elem al tope de la pila"""
        self._head = _Node(elem, self._take_head())
        self._size += 1
        self._version += 1

    def pop(self):
        """Extrae y retorna el item del tope, o None si está vacía"""
        node = self._pop_node()
        if node is None:
            return None
        return node.elem

    def peek(self):
        """Retorna el item del tope sin extraerlo"""
        if self._head is None:
            return None
        return self._head.elem

    def peek_mut(self) -> Optional[ElementRef]:
        """
        Retorna un ElementRef para modificar el tope en su lugar.
        Cualquier push/pop/clear posterior lo invalida.
        """
        if self._head is None:
            return None
        return ElementRef(self, self._head)

    def into_iter(self) -> "IntoIter":
        """
        Mueve toda la cadena a un iterador consumidor; esta pila queda vacía.
        """
        moved = Stack()
        moved._head = self._take_head()
        moved._size, self._size = self._size, 0
        self._version += 1
        return IntoIter(moved)

    into_consuming_sequence = into_iter

    def _teardown(self):
        released = 0
        # Un nodo a la vez: nunca se libera un nodo que todavía tenga `next`
        while self._pop_node() is not None:
            released += 1
        return released

    def clear(self) -> int:
        """Libera todos los nodos. Retorna cuántos se liberaron"""
        released = self._teardown()
        logger.debug("stack cleared, %d nodes released", released)
        return released

    def is_empty(self) -> bool:
        """Verifica si la pila está vacía"""
        return self._head is None

    def size(self) -> int:
        """Retorna el tamaño de la pila"""
        return self._size

    def __len__(self):
        return self._size

    def __bool__(self):
        return self._head is not None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.clear()
        return False

    def __del__(self):
        # Sin logging: puede correr durante el cierre del intérprete
        self._teardown()


class IntoIter(Iterator):
    """
    Secuencia consumidora: cada next() equivale a un pop().
    Una vez agotada, sigue agotada.
    """

    def __init__(self, stack):
        self._stack = stack

    def __iter__(self):
        return self

    def __next__(self):
        node = self._stack._pop_node()
        if node is None:
            raise StopIteration
        return node.elem
